# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

"""
Implied interest rate search.

Finds the annual rate at which a loan of ``principal`` repaid by ``periods``
equal repayments is (approximately) paid off, using ``simulate_balance`` as
the oracle. Candidates are scanned upward from 0% in fixed steps and the
first one that satisfies either condition wins:

1. the simulated balance is exactly zero, or
2. the simulated balance is negative by no more than one repayment.

The second condition is a tolerance, not a true root: the answer is the
lowest grid rate that leaves the borrower within one repayment of a
paid-off loan. Candidates are accumulated by repeated addition of the step
(not ``i * step``), which fixes the grid values the documented results
depend on.

The scan is bounded by ``SolverSettings.max_rate`` and, optionally, by
``SolverSettings.timeout_seconds``; when no candidate qualifies a
``NoConvergenceError`` is raised.
"""

from __future__ import annotations

import logging
import time

from .amortization import accrue_and_repay, periodic_rate_from_annual_percent
from .core.exceptions import NoConvergenceError
from .core.primitives import FormatSettings, SolverSettings, format_rate
from .core.validation import ensure_finite, ensure_nonzero, ensure_period_count

logger = logging.getLogger(__name__)

# How many candidates to evaluate between wall-clock checks
_TIMEOUT_CHECK_INTERVAL = 1000


def _is_paid_off(balance: float, repayment: float) -> bool:
    if balance > 0:
        return False
    if balance == 0:
        return True
    return -balance <= repayment


def solve_rate(
    principal: float,
    periods: int,
    repayment: float,
    settings: SolverSettings = None,
) -> float:
    """
    Annual interest rate (percent) implied by a loan and its repayments.

    Args:
        principal: Loan amount
        periods: Number of monthly repayments
        repayment: Amount repaid each month (EMI)
        settings: Search step, ceiling and timeout; defaults to ``SolverSettings()``

    Returns:
        The first grid rate, scanning upward from 0, at which the loan is paid
        off to within one repayment

    Raises:
        InvalidInputError: If an argument is non-numeric or zero, or
            ``periods`` is not a whole number
        NoConvergenceError: If no rate up to ``settings.max_rate`` qualifies,
            or the search runs past ``settings.timeout_seconds``

    Example:
        >>> round(solve_rate(100000, 10 * 12, 1061), 3)
        4.867
    """
    settings = settings or SolverSettings()
    principal = ensure_nonzero("loanAmount", ensure_finite("loanAmount", principal))
    periods = ensure_nonzero("loanTerms", ensure_period_count("loanTerms", periods))
    repayment = ensure_nonzero(
        "monthlyRepayment", ensure_finite("monthlyRepayment", repayment)
    )

    logger.debug(
        f"Solving rate for loan {principal:,.2f} over {periods} periods "
        f"at {repayment:,.2f} per period"
    )

    started = time.monotonic()
    candidate = 0.0
    for iteration in range(settings.max_iterations):
        balance = accrue_and_repay(
            principal,
            periodic_rate_from_annual_percent(candidate),
            periods,
            repayment,
        )
        if _is_paid_off(balance, repayment):
            logger.debug(
                f"Rate converged at {candidate:.3f}% after {iteration + 1} candidates "
                f"(residual balance {balance:,.2f})"
            )
            return candidate

        if (
            settings.timeout_seconds is not None
            and iteration % _TIMEOUT_CHECK_INTERVAL == 0
            and time.monotonic() - started > settings.timeout_seconds
        ):
            logger.warning(
                f"Rate search timed out after {settings.timeout_seconds}s "
                f"at candidate {candidate:.3f}%"
            )
            raise NoConvergenceError(
                f"Rate not found within {settings.timeout_seconds} seconds.",
                last_rate=candidate,
                iterations=iteration + 1,
            )

        candidate += settings.step

    logger.warning(
        f"Rate search exhausted {settings.max_iterations} candidates "
        f"up to {settings.max_rate}% without converging"
    )
    raise NoConvergenceError(
        f"Rate not found at or below {settings.max_rate}%.",
        last_rate=candidate - settings.step,
        iterations=settings.max_iterations,
    )


def rate(
    principal: float,
    periods: int,
    repayment: float,
    settings: SolverSettings = None,
    format_settings: FormatSettings = None,
) -> str:
    """
    ``solve_rate`` formatted as a percentage.

    Example:
        >>> rate(100000, 10 * 12, 1061)
        '4.867 %'
    """
    return format_rate(solve_rate(principal, periods, repayment, settings), format_settings)
