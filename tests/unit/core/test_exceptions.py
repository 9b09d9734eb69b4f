# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

import pytest

from finexpr.core.exceptions import (
    ExpressionParseError,
    FinancialExpressionError,
    InvalidInputError,
    NoConvergenceError,
)
from finexpr.core.primitives import ErrorKind


@pytest.mark.parametrize(
    "error, builtin, kind",
    [
        (InvalidInputError("bad"), ValueError, ErrorKind.INVALID_INPUT),
        (ExpressionParseError("bad", "1:2"), ValueError, ErrorKind.PARSE_ERROR),
        (NoConvergenceError("bad", 1.0, 10), RuntimeError, ErrorKind.NO_CONVERGENCE),
    ],
)
def test_hierarchy(error, builtin, kind):
    assert isinstance(error, FinancialExpressionError)
    assert isinstance(error, builtin)
    assert error.kind == kind


def test_message_with_details():
    error = InvalidInputError("loanTerm must be an integer.", {"loanTerm": 12.5})
    assert str(error) == "loanTerm must be an integer. - {'loanTerm': 12.5}"
    assert error.message == "loanTerm must be an integer."


def test_parse_error_keeps_expression():
    error = ExpressionParseError("Input expression: x is not a valid expression.", "x")
    assert error.expression == "x"
    assert str(error) == "Input expression: x is not a valid expression."


def test_no_convergence_details():
    error = NoConvergenceError("Rate not found at or below 5.0%.", last_rate=4.99999999, iterations=5001)
    assert error.last_rate == 4.99999999
    assert error.iterations == 5001
    assert error.details == {"last_rate": 5.0, "iterations": 5001}
