# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from finexpr.core.primitives import (
    FormatSettings,
    RoundingEnum,
    format_fixed,
    format_money,
    format_rate,
    format_whole,
)


@pytest.mark.parametrize(
    "value, decimals, expected",
    [
        (385957.2912, 2, "385957.29"),
        (517255.6, 2, "517255.60"),
        (0.125, 2, "0.13"),  # exact binary tie rounds away from zero
        (-0.125, 2, "-0.13"),
        (2.675, 2, "2.67"),  # stored just below the tie
        (1.5, 0, "2"),
        (4.8669999999999, 3, "4.867"),
        (100000, 2, "100000.00"),
    ],
)
def test_format_fixed(value, decimals, expected):
    assert format_fixed(value, decimals) == expected


@pytest.mark.parametrize(
    "value, decimals, expected",
    [
        (385957.29594595614, 2, "385957.29"),
        (517255.6075, 2, "517255.60"),
        (0.125, 2, "0.12"),
        (-0.129, 2, "-0.12"),
        (1.999, 0, "1"),
    ],
)
def test_format_fixed_truncating(value, decimals, expected):
    assert format_fixed(value, decimals, RoundingEnum.DOWN) == expected


def test_format_money_rounding_mode():
    assert format_money(385957.29594595614) == "385957.30"
    assert format_money(385957.29594595614, rounding=RoundingEnum.DOWN) == "385957.29"


def test_negative_zero_has_no_sign():
    assert format_fixed(-0.0, 2) == "0.00"


def test_small_negative_keeps_sign():
    assert format_fixed(-0.001, 2) == "-0.00"


def test_format_money_uses_settings():
    assert format_money(56181.413956216784) == "56181.41"
    assert format_money(56181.413956216784, FormatSettings(money_decimals=1)) == "56181.4"


def test_format_rate():
    assert format_rate(4.867) == "4.867 %"
    assert format_rate(0.0) == "0.000 %"
    assert format_rate(4.867, FormatSettings(rate_decimals=2, rate_suffix="%")) == "4.87%"


@pytest.mark.parametrize(
    "value, expected",
    [(1887.9999, "1887"), (1060.66, "1060"), (0.4, "0"), (-3.7, "-3")],
)
def test_format_whole_truncates_toward_zero(value, expected):
    assert format_whole(value) == expected
