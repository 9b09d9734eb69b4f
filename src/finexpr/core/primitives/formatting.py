# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

"""
Fixed-point rendering of calculation results.

Values are quantized from their exact binary representation. The default
mode rounds ties away from zero, so ``2.675`` (stored as ``2.67499999...``)
renders as ``"2.67"`` while an exact tie such as ``0.125`` renders as
``"0.13"``. ``RoundingEnum.DOWN`` truncates toward zero instead; present and
future values are rendered that way (``385957.2959...`` becomes
``"385957.29"``).
"""

from __future__ import annotations

import math
from decimal import Decimal

from .enums import RoundingEnum
from .settings import FormatSettings


def format_fixed(
    value: float, decimals: int, rounding: RoundingEnum = RoundingEnum.HALF_UP
) -> str:
    """Render ``value`` with exactly ``decimals`` digits after the point."""
    if value == 0:
        value = 0.0  # drop the sign of negative zero
    quantum = Decimal(1).scaleb(-decimals)
    return str(Decimal(value).quantize(quantum, rounding=RoundingEnum(rounding).value))


def format_money(
    value: float,
    settings: FormatSettings = None,
    rounding: RoundingEnum = RoundingEnum.HALF_UP,
) -> str:
    settings = settings or FormatSettings()
    return format_fixed(value, settings.money_decimals, rounding)


def format_rate(value: float, settings: FormatSettings = None) -> str:
    """Render an annual percentage such as ``4.867`` as ``"4.867 %"``."""
    settings = settings or FormatSettings()
    return f"{format_fixed(value, settings.rate_decimals)}{settings.rate_suffix}"


def format_whole(value: float) -> str:
    """Truncate toward zero and render as an integer string."""
    return str(math.trunc(value))
