# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

"""
Argument validation shared by the public calculation functions.

Each calculation validates its inputs at the boundary, so helpers here
raise ``InvalidInputError`` rather than returning flags:
- Real-valued arguments must be finite numbers (bools are rejected)
- Period counts must be non-negative integers; integral floats such as
  ``120.0`` are accepted and converted, fractional ones are not
"""

from __future__ import annotations

import math
import numbers
from typing import Any

from .exceptions import InvalidInputError


def ensure_finite(name: str, value: Any) -> float:
    """
    Validate that ``value`` is a finite real number.

    Args:
        name: Argument name used in the error message
        value: Candidate value

    Returns:
        The value as a float

    Raises:
        InvalidInputError: If the value is not a finite real number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInputError(
            f"{name} must be a number.", {name: value}
        )
    value = float(value)
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be a finite number.", {name: value})
    return value


def ensure_period_count(name: str, value: Any) -> int:
    """
    Validate that ``value`` is a non-negative whole number of periods.

    Args:
        name: Argument name used in the error message
        value: Candidate value

    Returns:
        The value as an int

    Raises:
        InvalidInputError: If the value is fractional, negative or non-numeric
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be an integer.", {name: value})
    if isinstance(value, numbers.Integral):
        periods = int(value)
    elif isinstance(value, numbers.Real) and float(value).is_integer():
        periods = int(value)
    else:
        raise InvalidInputError(f"{name} must be an integer.", {name: value})
    if periods < 0:
        raise InvalidInputError(f"{name} must not be negative.", {name: value})
    return periods


def ensure_nonzero(name: str, value: float) -> float:
    """Reject zero for arguments the rate search divides the problem by."""
    if value == 0:
        raise InvalidInputError(f"{name} must be a non-zero number.", {name: value})
    return value
