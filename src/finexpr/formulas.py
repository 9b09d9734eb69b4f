# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

"""
Closed-form annuity formulas.

All functions take a *periodic* rate expressed as a fraction per period,
e.g. ``4.5 / 100 / 12`` for 4.5% a year paid monthly. The ``*_amount``
functions return raw floats; ``present_value``, ``future_value`` and
``payment`` return the formatted strings callers display.

Formulas (P := periodic payment, r := periodic rate, n := number of periods):
    PV  = P * (1 - (1 + r) ^ -n) / r
    FV  = P * ((1 + r) ^ n - 1) / r
    PMT = principal * r * (1 + r) ^ n / ((1 + r) ^ n - 1)

At ``r == 0`` the general forms reduce to 0/0, so the linear limits
``P * n`` (PV and FV) and ``principal / n`` (PMT) are used instead.
"""

from __future__ import annotations

import math
from typing import Optional

from pyxirr import fv, pmt, pv

from .core.exceptions import InvalidInputError
from .core.primitives import FormatSettings, format_money, format_whole
from .core.validation import ensure_finite, ensure_period_count


def _checked(result: Optional[float], name: str) -> float:
    if result is None or not math.isfinite(result):
        raise InvalidInputError(f"{name} is undefined for the given inputs.")
    return float(result)


def present_value_amount(periodic_rate: float, periods: int, monthly_payment: float) -> float:
    """
    Present value of ``periods`` equal payments discounted at ``periodic_rate``.

    Example:
        >>> round(present_value_amount(4.5 / 100 / 12, 10 * 12, 4000), 4)
        385957.2959
    """
    rate = ensure_finite("interestRate", periodic_rate)
    periods = ensure_period_count("loanTerm", periods)
    monthly_payment = ensure_finite("monthlyPayment", monthly_payment)

    if rate == 0:
        return monthly_payment * periods
    # pyxirr follows the spreadsheet sign convention: money paid out is negative
    return -_checked(pv(rate, periods, monthly_payment), "Present value")


def future_value_amount(periodic_rate: float, periods: int, monthly_payment: float) -> float:
    """
    Future value of ``periods`` equal payments compounded at ``periodic_rate``.

    Example:
        >>> int(future_value_amount(4.5 / 100 / 12, 10 * 12, 4000))
        604792
    """
    rate = ensure_finite("interestRate", periodic_rate)
    periods = ensure_period_count("loanTerm", periods)
    monthly_payment = ensure_finite("monthlyPayment", monthly_payment)

    if rate == 0:
        return monthly_payment * periods
    return -_checked(fv(rate, periods, monthly_payment, 0), "Future value")


def payment_amount(periodic_rate: float, periods: int, principal: float) -> float:
    """
    Level payment that amortizes ``principal`` over ``periods`` periods.

    Raises:
        InvalidInputError: If any argument is invalid or ``periods`` is zero
    """
    rate = ensure_finite("interestRate", periodic_rate)
    periods = ensure_period_count("loanTerm", periods)
    principal = ensure_finite("loanAmount", principal)

    if periods == 0:
        raise InvalidInputError(
            "loanTerm must be at least one period to compute a payment.",
            {"loanTerm": periods},
        )
    if rate == 0:
        return principal / periods
    return -_checked(pmt(rate, periods, principal), "Payment")


def present_value(
    periodic_rate: float,
    periods: int,
    monthly_payment: float,
    settings: FormatSettings = None,
) -> str:
    """
    Present value truncated to two decimals.

    Examples:
        >>> present_value(4.5 / 100 / 12, 10 * 12, 4000)
        '385957.29'
        >>> present_value(6 / 100 / 12, 5 * 12, 10000)
        '517255.60'
    """
    settings = settings or FormatSettings()
    return format_money(
        present_value_amount(periodic_rate, periods, monthly_payment),
        settings,
        settings.annuity_rounding,
    )


def future_value(
    periodic_rate: float,
    periods: int,
    monthly_payment: float,
    settings: FormatSettings = None,
) -> str:
    """
    Future value truncated to two decimals.

    Examples:
        >>> future_value(4.5 / 100 / 12, 10 * 12, 4000)
        '604792.29'
        >>> future_value(6 / 100 / 12, 5 * 12, 10000)
        '697700.30'
    """
    settings = settings or FormatSettings()
    return format_money(
        future_value_amount(periodic_rate, periods, monthly_payment),
        settings,
        settings.annuity_rounding,
    )


def payment(periodic_rate: float, periods: int, principal: float) -> str:
    """
    Periodic repayment truncated to a whole currency unit.

    Examples:
        >>> payment(5 / 100 / 12, 5 * 12, 100000)
        '1887'
        >>> payment(5 / 100 / 12, 10 * 12, 100000)
        '1060'
    """
    return format_whole(payment_amount(periodic_rate, periods, principal))
