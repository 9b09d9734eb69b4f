# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

"""
finexpr - Deterministic loan and annuity calculations

Closed-form present value, future value and payment formulas, a month-by-month
balance simulator, and an implied interest rate search built on it.

Key Entry Points:
- finexpr.FinancialExpression - Calculator facade returning formatted strings
- finexpr.calculate() - Tagged success/failure results instead of exceptions
- finexpr.simulate_balance() / finexpr.amortization_schedule() - Amortization
- finexpr.solve_rate() - Implied annual rate

Example Usage:
    ```python
    import finexpr

    finexpr.present_value(4.5 / 100 / 12, 120, 4000)  # "385957.29"
    finexpr.payment(5 / 100 / 12, 60, 100000)         # "1887"
    finexpr.balance("100000 : 5 : 1061 : 60")         # "56181.41"
    finexpr.rate(100000, 120, 1061)                   # "4.867 %"
    ```
"""

import logging

from .amortization import amortization_schedule, simulate_balance
from .api import FinancialExpression, calculate
from .core import (
    CalculationResult,
    CalculationSettings,
    ErrorKind,
    ExpressionParseError,
    FinancialExpressionError,
    FormatSettings,
    InvalidInputError,
    NoConvergenceError,
    OperationEnum,
    SolverSettings,
)
from .expression import LoanParameters, balance, parse_expression
from .formulas import (
    future_value,
    future_value_amount,
    payment,
    payment_amount,
    present_value,
    present_value_amount,
)
from .solver import rate, solve_rate

# Libraries leave handler configuration to the application
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Facade
    "FinancialExpression",
    "calculate",
    # Formulas
    "present_value",
    "present_value_amount",
    "future_value",
    "future_value_amount",
    "payment",
    "payment_amount",
    # Amortization
    "simulate_balance",
    "amortization_schedule",
    # Rate search
    "solve_rate",
    "rate",
    # Expressions
    "LoanParameters",
    "parse_expression",
    "balance",
    # Settings and results
    "CalculationSettings",
    "FormatSettings",
    "SolverSettings",
    "CalculationResult",
    "ErrorKind",
    "OperationEnum",
    # Errors
    "FinancialExpressionError",
    "InvalidInputError",
    "ExpressionParseError",
    "NoConvergenceError",
]
