"""Debt summary statistics - closed-form, no simulation"""

import math
from typing import List
from debt_planner.domain.models import DebtItem, DebtSummary


def months_to_payoff(balance: float, annual_rate: float, payment: float) -> float:
    """
    Closed-form annuity horizon: n = -ln(1 - B*r/P) / ln(1 + r), r = annual_rate / 12.

    Returns math.inf when the payment does not cover the monthly interest.
    The result is fractional; the final partial month is a real month.
    """
    if balance <= 0:
        return 0.0

    r = annual_rate / 12
    if payment <= balance * r or payment <= 0:
        return math.inf
    if r == 0:
        return balance / payment

    return -math.log(1 - (balance * r) / payment) / math.log(1 + r)


def calculate_summary(debts: List[DebtItem]) -> DebtSummary:
    """
    Aggregate totals and a naive debt-free horizon at minimum payments.

    Debts are assumed to be paid in parallel at their own minimums, so the
    overall horizon is the slowest debt, not the sum.
    """
    total_debt = sum(d.balance for d in debts)
    total_minimum = sum(d.minimum_payment for d in debts)

    # Balance-weighted average rate (avoid division by zero)
    weighted_rate = (
        sum(d.balance * d.annual_interest_rate for d in debts) / total_debt
        if total_debt > 0
        else 0.0
    )

    rates = [d.annual_interest_rate for d in debts]

    horizon = max(
        (months_to_payoff(d.balance, d.annual_interest_rate, d.minimum_payment) for d in debts),
        default=0.0,
    )
    if not math.isinf(horizon):
        # Absorb float noise before rounding up to whole months
        horizon = math.ceil(round(horizon, 9))

    return DebtSummary(
        total_debt=total_debt,
        total_minimum_payment=total_minimum,
        total_monthly_payment=total_minimum,
        average_interest_rate=weighted_rate,
        debt_count=len(debts),
        highest_interest_rate=max(rates, default=0.0),
        lowest_interest_rate=min(rates, default=0.0),
        debt_free_months=horizon,
    )
