# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures for finexpr tests.

Loan figures here are the documented reference cases.
"""

from __future__ import annotations

import pytest

from finexpr import CalculationSettings, FinancialExpression, SolverSettings


@pytest.fixture
def reference_loan() -> dict:
    """The 100,000 loan used throughout the documented examples."""
    return {
        "principal": 100_000,
        "annual_rate_percent": 5,
        "periods": 60,
        "repayment": 1061,
        "expected_balance": "56181.41",
    }


@pytest.fixture
def fast_solver() -> SolverSettings:
    """Low ceiling so non-converging searches fail quickly."""
    return SolverSettings(max_rate=5.0)


@pytest.fixture
def calculator() -> FinancialExpression:
    return FinancialExpression(CalculationSettings())
