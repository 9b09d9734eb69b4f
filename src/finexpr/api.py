# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

"""
Public entry points for loan calculations.

Two shapes over the same calculations:

- ``FinancialExpression`` methods return formatted strings and raise
  ``FinancialExpressionError`` subclasses on failure.
- ``calculate()`` never raises for calculation failures; it returns a
  ``CalculationResult`` tagged with success or the kind of error.

Example Usage:
    ```python
    from finexpr import FinancialExpression, calculate

    calc = FinancialExpression()
    calc.pv(4.5 / 100 / 12, 10 * 12, 4000)   # "385957.29"
    calc.balance("100000 : 5 : 1061 : 60")  # "56181.41"

    result = calculate("rate", 100000, 120, 1061)
    result.value                             # "4.867 %"
    ```
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Dict, Union

from . import expression, formulas, solver
from .core.exceptions import FinancialExpressionError
from .core.primitives import CalculationSettings, ErrorKind, OperationEnum
from .core.results import CalculationResult

logger = logging.getLogger(__name__)


class FinancialExpression:
    """
    Loan calculator bound to one set of ``CalculationSettings``.

    Rate conventions differ by method and are part of each signature:
    ``pv``, ``fv`` and ``pmt`` take a periodic (monthly) fractional rate,
    while ``balance`` expressions and ``rate`` results use annual percent.
    """

    def __init__(self, settings: CalculationSettings = None):
        self.settings = settings or CalculationSettings()

    def pv(self, periodic_rate: float, loan_term: int, monthly_payment: float) -> str:
        return formulas.present_value(
            periodic_rate, loan_term, monthly_payment, self.settings.format
        )

    def fv(self, periodic_rate: float, loan_term: int, monthly_payment: float) -> str:
        return formulas.future_value(
            periodic_rate, loan_term, monthly_payment, self.settings.format
        )

    def pmt(self, periodic_rate: float, loan_term: int, loan_amount: float) -> str:
        return formulas.payment(periodic_rate, loan_term, loan_amount)

    def balance(self, expr: str) -> str:
        return expression.balance(expr, self.settings.format)

    def rate(self, loan_amount: float, loan_terms: int, monthly_repayment: float) -> str:
        return solver.rate(
            loan_amount,
            loan_terms,
            monthly_repayment,
            self.settings.solver,
            self.settings.format,
        )

    def _operations(self) -> Dict[OperationEnum, Callable[..., str]]:
        return {
            OperationEnum.PRESENT_VALUE: self.pv,
            OperationEnum.FUTURE_VALUE: self.fv,
            OperationEnum.PAYMENT: self.pmt,
            OperationEnum.BALANCE: self.balance,
            OperationEnum.RATE: self.rate,
        }

    def calculate(
        self, operation: Union[OperationEnum, str], *args: Any
    ) -> CalculationResult:
        """
        Run one calculation and capture its outcome.

        Args:
            operation: An ``OperationEnum`` or its value ("pv", "fv", "pmt",
                "balance", "rate")
            *args: Positional arguments of the matching method

        Returns:
            ``CalculationResult`` with the formatted value, or the error message
            and ``ErrorKind`` when the calculation failed
        """
        try:
            op = OperationEnum(operation)
        except ValueError:
            raise ValueError(f"Unknown operation: {operation!r}") from None

        method = self._operations()[op]
        try:
            inspect.signature(method).bind(*args)
        except TypeError as e:
            logger.debug(f"{op.value} called with bad arguments {args!r}: {e}")
            return CalculationResult.fail(op, str(e), ErrorKind.INVALID_INPUT)

        try:
            return CalculationResult.ok(op, method(*args))
        except FinancialExpressionError as e:
            logger.debug(f"{op.value}{args!r} failed: {e}")
            return CalculationResult.from_exception(op, e)


def calculate(
    operation: Union[OperationEnum, str],
    *args: Any,
    settings: CalculationSettings = None,
) -> CalculationResult:
    """Module-level shortcut for ``FinancialExpression(settings).calculate``."""
    return FinancialExpression(settings).calculate(operation, *args)
