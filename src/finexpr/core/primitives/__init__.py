# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

"""
finexpr Core Primitives

Building blocks shared by every calculation: the immutable model base,
constrained numeric types, settings and formatting.
"""

from .enums import ErrorKind, OperationEnum, RoundingEnum
from .formatting import format_fixed, format_money, format_rate, format_whole
from .model import Model
from .settings import CalculationSettings, FormatSettings, SolverSettings
from .types import (
    FiniteFloat,
    NonNegativeFloat,
    NonNegativeInt,
    PositiveFloat,
    PositiveInt,
)

__all__ = [
    # Core models
    "Model",
    # Settings
    "CalculationSettings",
    "FormatSettings",
    "SolverSettings",
    # Enums
    "ErrorKind",
    "OperationEnum",
    "RoundingEnum",
    # Types
    "FiniteFloat",
    "NonNegativeFloat",
    "NonNegativeInt",
    "PositiveFloat",
    "PositiveInt",
    # Formatting
    "format_fixed",
    "format_money",
    "format_rate",
    "format_whole",
]
