# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

"""
Loan expression parsing and the composed ``balance`` operation.

A loan expression lists four colon-separated numbers in a fixed order::

    PRINCIPAL : INTERESTRATE : MONTHLYREPAYMENT : TERMS

``INTERESTRATE`` is an annual percentage (``5`` for 5%) and ``TERMS`` a
whole number of months. Whitespace around each field is ignored, so
``"100000 : 5 : 1061 : 60"`` and ``"100000:5:1061:60"`` are equivalent.
"""

from __future__ import annotations

import logging
import re

from pydantic import Field, ValidationError

from .amortization import simulate_balance
from .core.exceptions import ExpressionParseError, FinancialExpressionError
from .core.primitives import (
    FiniteFloat,
    FormatSettings,
    Model,
    NonNegativeInt,
    PositiveFloat,
    format_money,
)

logger = logging.getLogger(__name__)

_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)"

LOAN_EXPRESSION_REGEX = re.compile(
    rf"^\s*(?P<PRINCIPAL>{_NUMBER})\s*"
    rf":\s*(?P<INTERESTRATE>{_NUMBER})\s*"
    rf":\s*(?P<MONTHLYREPAYMENT>{_NUMBER})\s*"
    r":\s*(?P<TERMS>\+?\d+)\s*$"
)


class LoanParameters(Model):
    """
    Validated numeric fields of a loan expression.

    Attributes:
        loan_amount: Principal, strictly positive
        interest_rate: Annual interest rate in percent
        loan_term: Number of monthly periods
        monthly_repayment: Amount repaid each period
    """

    loan_amount: PositiveFloat
    interest_rate: FiniteFloat = Field(
        ..., description="Annual interest rate in percent (e.g., 4.5 for 4.5%)"
    )
    loan_term: NonNegativeInt
    monthly_repayment: FiniteFloat


def parse_expression(expression: str) -> LoanParameters:
    """
    Parse a loan expression into ``LoanParameters``.

    Example:
        >>> parse_expression("100000: 4.5 : 4000 : 60")
        LoanParameters(loan_amount=100000.0, interest_rate=4.5, loan_term=60, monthly_repayment=4000.0)

    Raises:
        ExpressionParseError: If the expression does not have exactly four
            numeric fields, or the fields fail validation
    """
    if not isinstance(expression, str):
        raise ExpressionParseError(
            f"Input expression: {expression!r} is not a valid expression.", expression
        )

    match = LOAN_EXPRESSION_REGEX.match(expression)
    if match is None:
        raise ExpressionParseError(
            f"Input expression: {expression} is not a valid expression.", expression
        )

    try:
        return LoanParameters(
            loan_amount=float(match["PRINCIPAL"]),
            interest_rate=float(match["INTERESTRATE"]),
            loan_term=int(match["TERMS"]),
            monthly_repayment=float(match["MONTHLYREPAYMENT"]),
        )
    except ValidationError as e:
        raise ExpressionParseError(
            f"Input expression: {expression} has invalid values: "
            f"{e.error_count()} validation error(s)",
            expression,
        ) from e


def balance(expression: str, settings: FormatSettings = None) -> str:
    """
    Remaining loan balance described by a loan expression.

    Examples:
        >>> balance("100000 : 5 : 1061 : 60")
        '56181.41'
        >>> balance("100000:5:1061:60")
        '56181.41'

    Raises:
        ExpressionParseError: If parsing or the simulation fails; the
            underlying error is kept as ``__cause__``
    """
    try:
        loan = parse_expression(expression)
        remaining = simulate_balance(
            loan.loan_amount,
            loan.interest_rate,
            loan.loan_term,
            loan.monthly_repayment,
        )
        return format_money(remaining, settings)
    except FinancialExpressionError as e:
        logger.debug(f"Failed to evaluate loan expression {expression!r}: {e}")
        raise ExpressionParseError(
            f"Error in parsing the expression: {expression}", expression
        ) from e
