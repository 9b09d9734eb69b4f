# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional

from pydantic import Field, model_validator

from .enums import RoundingEnum
from .model import Model
from .types import NonNegativeInt, PositiveFloat


class FormatSettings(Model):
    """Settings related to how results are rendered as strings."""

    money_decimals: NonNegativeInt = Field(
        default=2, description="Number of decimal places for currency values."
    )
    rate_decimals: NonNegativeInt = Field(
        default=3, description="Number of decimal places for solved interest rates."
    )
    rate_suffix: str = Field(
        default=" %", description="Text appended to a formatted interest rate."
    )
    annuity_rounding: RoundingEnum = Field(
        default=RoundingEnum.DOWN,
        description="Rounding applied to present and future values; balances always round half up.",
    )


class SolverSettings(Model):
    """
    Configuration for the iterative interest rate search.

    The search scans annual rates upward from zero in fixed steps. The
    ceiling and optional timeout turn a combination of inputs that has no
    solution into a ``NoConvergenceError`` instead of an endless loop.

    Usage Examples:
        # Default behaviour: 0.001 point steps up to 100%
        solver = SolverSettings()

        # Responsive callers: give up after half a second
        solver = SolverSettings(timeout_seconds=0.5)
    """

    step: PositiveFloat = Field(
        default=0.001,
        description="Increment between candidate annual rates, in percentage points.",
    )
    max_rate: PositiveFloat = Field(
        default=100.0,
        description="Highest annual rate (percent) tried before giving up.",
    )
    timeout_seconds: Optional[PositiveFloat] = Field(
        default=None,
        description="Wall-clock budget for one search; None disables the check.",
    )

    @model_validator(mode="after")
    def check_step_below_ceiling(self) -> "SolverSettings":
        """Ensure at least one step fits under the rate ceiling."""
        if self.step > self.max_rate:
            raise ValueError("step must not exceed max_rate")
        return self

    @property
    def max_iterations(self) -> int:
        """Number of candidate rates the search may evaluate."""
        return int(round(self.max_rate / self.step)) + 1


class CalculationSettings(Model):
    """
    Top-level configuration passed to the calculation facade.

    Usage Examples:
        # Defaults matching the documented outputs
        settings = CalculationSettings()

        # Coarser search with a tighter ceiling
        settings = CalculationSettings(
            solver=SolverSettings(step=0.01, max_rate=40.0)
        )
    """

    format: FormatSettings = Field(default_factory=FormatSettings)
    solver: SolverSettings = Field(default_factory=SolverSettings)
