# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for CalculationResult.
"""

import pytest
from pydantic import ValidationError

from finexpr.core.exceptions import InvalidInputError, NoConvergenceError
from finexpr.core.primitives import ErrorKind, OperationEnum
from finexpr.core.results import CalculationResult


class TestCalculationResult:
    def test_ok(self):
        result = CalculationResult.ok(OperationEnum.BALANCE, "56181.41")

        assert result
        assert result.unwrap() == "56181.41"
        assert result.unwrap_or("n/a") == "56181.41"
        assert result.error_kind is None

    def test_fail(self):
        result = CalculationResult.fail(
            OperationEnum.PAYMENT, "loanTerm must be an integer.", ErrorKind.INVALID_INPUT
        )

        assert not result
        assert result.unwrap_or("n/a") == "n/a"
        with pytest.raises(ValueError, match="loanTerm must be an integer"):
            result.unwrap()

    def test_from_exception_keeps_kind(self):
        exc = NoConvergenceError("Rate not found.", last_rate=100.0, iterations=100001)
        result = CalculationResult.from_exception(OperationEnum.RATE, exc)

        assert result.error_kind == ErrorKind.NO_CONVERGENCE
        assert "Rate not found." in result.error
        assert "iterations" in result.error

    def test_from_invalid_input(self):
        result = CalculationResult.from_exception(
            OperationEnum.PRESENT_VALUE, InvalidInputError("interestRate must be a number.")
        )
        assert result.error == "interestRate must be a number."
        assert result.error_kind == ErrorKind.INVALID_INPUT

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"success": True},
            {"success": True, "value": "1.00", "error": "boom"},
            {"success": False},
            {"success": False, "value": "1.00", "error": "boom"},
        ],
    )
    def test_inconsistent_outcomes_rejected(self, kwargs):
        with pytest.raises(ValidationError):
            CalculationResult(operation=OperationEnum.PRESENT_VALUE, **kwargs)

    def test_frozen(self):
        result = CalculationResult.ok(OperationEnum.RATE, "4.867 %")
        with pytest.raises(ValidationError):
            result.value = "5.000 %"
