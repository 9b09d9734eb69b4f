# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised by finexpr calculations."""

from __future__ import annotations

from typing import Any, Dict, Optional

from .primitives.enums import ErrorKind


class FinancialExpressionError(Exception):
    """Base exception for all finexpr errors."""

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class InvalidInputError(FinancialExpressionError, ValueError):
    """Raised when an argument is non-numeric, non-finite or out of range."""

    kind = ErrorKind.INVALID_INPUT


class ExpressionParseError(FinancialExpressionError, ValueError):
    """Raised when a loan expression string cannot be evaluated."""

    kind = ErrorKind.PARSE_ERROR

    def __init__(self, message: str, expression: str):
        super().__init__(message)
        self.expression = expression


class NoConvergenceError(FinancialExpressionError, RuntimeError):
    """Raised when the rate search exhausts its bounds without a solution."""

    kind = ErrorKind.NO_CONVERGENCE

    def __init__(self, message: str, last_rate: float, iterations: int):
        super().__init__(
            message, {"last_rate": round(last_rate, 3), "iterations": iterations}
        )
        self.last_rate = last_rate
        self.iterations = iterations
