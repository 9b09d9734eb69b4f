# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

"""
finexpr core: primitives, validation, errors and result records shared by
every calculation module.
"""

from .exceptions import (
    ExpressionParseError,
    FinancialExpressionError,
    InvalidInputError,
    NoConvergenceError,
)
from .primitives import (
    CalculationSettings,
    ErrorKind,
    FormatSettings,
    Model,
    OperationEnum,
    SolverSettings,
)
from .results import CalculationResult

__all__ = [
    # Errors
    "FinancialExpressionError",
    "InvalidInputError",
    "ExpressionParseError",
    "NoConvergenceError",
    # Results
    "CalculationResult",
    # Primitives
    "CalculationSettings",
    "ErrorKind",
    "FormatSettings",
    "Model",
    "OperationEnum",
    "SolverSettings",
]
