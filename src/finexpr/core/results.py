# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

"""
Tagged outcome of a single calculation.

``CalculationResult`` is what ``finexpr.api.calculate`` returns: either a
fully formatted value or the error that stopped the calculation, never a
partial result.

Example:
    ```python
    result = calculate("rate", 100000, 120, 1061)
    if result:
        print(result.value)       # "4.867 %"
    else:
        print(result.error_kind)  # ErrorKind.NO_CONVERGENCE, ...
    ```
"""

from __future__ import annotations

from typing import Optional

from pydantic import model_validator

from .exceptions import FinancialExpressionError
from .primitives import ErrorKind, Model, OperationEnum


class CalculationResult(Model):
    """
    Outcome of one calculation call.

    Attributes:
        operation: Calculation that produced this result
        success: Whether the calculation completed
        value: Formatted result on success, None on failure
        error: Error message on failure, None on success
        error_kind: Category of the failure for programmatic handling
    """

    operation: OperationEnum
    success: bool
    value: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    @model_validator(mode="after")
    def check_outcome_consistency(self) -> "CalculationResult":
        """A result carries a value or an error, matching its success flag."""
        if self.success and (self.value is None or self.error is not None):
            raise ValueError("successful results carry a value and no error")
        if not self.success and (self.error is None or self.value is not None):
            raise ValueError("failed results carry an error and no value")
        return self

    @classmethod
    def ok(cls, operation: OperationEnum, value: str) -> "CalculationResult":
        return cls(operation=operation, success=True, value=value)

    @classmethod
    def fail(
        cls,
        operation: OperationEnum,
        error: str,
        error_kind: Optional[ErrorKind] = None,
    ) -> "CalculationResult":
        return cls(
            operation=operation, success=False, error=error, error_kind=error_kind
        )

    @classmethod
    def from_exception(
        cls, operation: OperationEnum, exc: FinancialExpressionError
    ) -> "CalculationResult":
        """Build a failed result from a raised calculation error."""
        return cls.fail(operation, str(exc), exc.kind)

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> str:
        """
        Get the value, raising if the calculation failed.

        Raises:
            ValueError: If the calculation failed
        """
        if not self.success:
            raise ValueError(f"Result unwrap failed: {self.error}")
        return self.value

    def unwrap_or(self, default: str) -> str:
        return self.value if self.success else default
