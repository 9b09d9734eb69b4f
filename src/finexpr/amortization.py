# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

"""Month-by-month loan balance simulation"""

from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from .core.exceptions import InvalidInputError
from .core.validation import ensure_finite, ensure_period_count

logger = logging.getLogger(__name__)


def periodic_rate_from_annual_percent(annual_rate_percent: float) -> float:
    """Convert an annual percentage (``5`` for 5%) to a monthly fraction."""
    return (annual_rate_percent / 100) / 12


def _validated(
    principal: float,
    annual_rate_percent: float,
    periods: int,
    repayment: float,
) -> Tuple[float, float, int, float]:
    return (
        ensure_finite("loanAmount", principal),
        ensure_finite("interestRate", annual_rate_percent),
        ensure_period_count("loanTerms", periods),
        ensure_finite("monthlyRepayment", repayment),
    )


def _finite_balance(balance: float, periods: int) -> float:
    if not math.isfinite(balance):
        raise InvalidInputError(
            f"Balance is not representable after {periods} periods.",
            {"loanTerms": periods},
        )
    return balance


def accrue_and_repay(
    principal: float, periodic_rate: float, periods: int, repayment: float
) -> float:
    """Unvalidated recurrence behind ``simulate_balance``; the rate search calls it directly."""
    balance = principal
    for _ in range(periods):
        # Accrue then repay, in this order, so results match to the last bit
        balance += (balance * periodic_rate) - repayment
    return balance


def simulate_balance(
    principal: float,
    annual_rate_percent: float,
    periods: int,
    repayment: float,
) -> float:
    """
    Remaining balance after ``periods`` monthly repayments.

    Each period the balance accrues one month of interest at
    ``annual_rate_percent / 100 / 12`` and is then reduced by ``repayment``.
    The result may be negative when the loan is overpaid.

    Args:
        principal: Loan amount at the start of the first period
        annual_rate_percent: Annual interest rate in percent, e.g. ``5`` for 5%
        periods: Number of monthly periods to simulate
        repayment: Amount repaid each period (EMI)

    Returns:
        Balance after the final period; ``principal`` when ``periods`` is 0

    Raises:
        InvalidInputError: If any argument is non-numeric or ``periods`` is
            not a non-negative integer
            or the balance overflows to a non-finite value

    Example:
        >>> simulate_balance(100000, 5, 5 * 12, 1061)
        56181.413956216784
    """
    principal, annual_rate_percent, periods, repayment = _validated(
        principal, annual_rate_percent, periods, repayment
    )
    remaining = accrue_and_repay(
        principal,
        periodic_rate_from_annual_percent(annual_rate_percent),
        periods,
        repayment,
    )
    return _finite_balance(remaining, periods)


def amortization_schedule(
    principal: float,
    annual_rate_percent: float,
    periods: int,
    repayment: float,
    start_date: Optional[pd.Period] = None,
) -> Tuple[pd.DataFrame, pd.Series]:
    """
    Detailed schedule behind ``simulate_balance``.

    Uses the same recurrence, so the last ``End Balance`` is bit-for-bit the
    value ``simulate_balance`` returns for the same arguments.

    Args:
        principal: Loan amount at the start of the first period
        annual_rate_percent: Annual interest rate in percent
        periods: Number of monthly periods to simulate
        repayment: Amount repaid each period
        start_date: Optional first payment month; when given the schedule is
            indexed by monthly ``pd.Period`` instead of period number

    Returns:
        Tuple containing:
        - DataFrame with columns:
            - Period: Payment period number (1-based)
            - Begin Balance: Balance before interest accrues
            - Interest: Interest accrued in the period
            - Repayment: Amount repaid
            - Principal: Reduction in balance (Repayment - Interest)
            - End Balance: Balance after repayment
        - Series with summary statistics:
            - Periods: Number of periods simulated
            - Final Balance: Balance after the last period
            - Total Repayments: Sum of repayments
            - Total Interest: Sum of interest accrued
            - Total Principal Repaid: principal - Final Balance
    """
    principal, annual_rate_percent, periods, repayment = _validated(
        principal, annual_rate_percent, periods, repayment
    )
    periodic_rate = periodic_rate_from_annual_percent(annual_rate_percent)

    balances = np.empty(shape=(periods + 1,))  # Extra element for initial balance
    interest = np.empty(shape=(periods,))
    balances[0] = principal

    balance = principal
    for i in range(periods):
        accrued = balance * periodic_rate
        interest[i] = accrued
        balance += accrued - repayment
        balances[i + 1] = balance
    _finite_balance(balance, periods)

    df = pd.DataFrame(
        {
            "Period": np.arange(1, periods + 1),
            "Begin Balance": balances[:-1],
            "Interest": interest,
            "Repayment": np.full(shape=(periods,), fill_value=repayment),
            "End Balance": balances[1:],
        }
    )
    df.insert(4, "Principal", df["Repayment"] - df["Interest"])
    if start_date is not None:
        df.index = pd.period_range(start_date, periods=periods, freq="M")
        df.index.name = "Month"

    summary = pd.Series(
        {
            "Periods": periods,
            "Final Balance": balances[-1],
            "Total Repayments": repayment * periods,
            "Total Interest": interest.sum(),
            "Total Principal Repaid": principal - balances[-1],
        }
    )

    logger.debug(
        f"Built {periods}-period schedule at {annual_rate_percent}%: "
        f"final balance {balances[-1]:,.2f}"
    )
    return df, summary
