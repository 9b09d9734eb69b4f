# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class OperationEnum(str, Enum):
    """Calculations exposed by the public API."""

    PRESENT_VALUE = "pv"
    FUTURE_VALUE = "fv"
    PAYMENT = "pmt"
    BALANCE = "balance"
    RATE = "rate"


class ErrorKind(str, Enum):
    """Category of a failed calculation, for programmatic handling."""

    INVALID_INPUT = "invalid_input"
    PARSE_ERROR = "parse_error"
    NO_CONVERGENCE = "no_convergence"


class RoundingEnum(str, Enum):
    """Decimal rounding modes used when rendering fixed-point values."""

    HALF_UP = "ROUND_HALF_UP"  # ties away from zero
    DOWN = "ROUND_DOWN"  # truncate toward zero
