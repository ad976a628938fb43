"""Amortization simulator - month-by-month payoff projection"""

from datetime import date
from typing import Dict, List, Optional
from debt_planner.domain.models import (
    DebtItem,
    DebtMonthEntry,
    MonthlySnapshot,
    PayoffMilestone,
    PayoffPlan,
    SimulationState,
)
from debt_planner.utils.date_utils import add_months

MAX_MONTHS = 600  # 50 years
PAID_OFF_EPSILON = 0.01


def allocate_budget(
    active: List[SimulationState],
    interest: Dict[str, float],
    budget: float,
) -> Dict[str, float]:
    """
    Split one month's budget across active debts in priority order.

    Rules:
    - Every debt behind the front is reserved its minimum payment (at least
      its accrued interest), while budget lasts
    - What is left goes to the front debt, then cascades down the order
      once the front debt is fully paid
    - No debt receives more than balance + interest
    """
    payments = {state.debt.id: 0.0 for state in active}
    remaining = max(budget, 0.0)

    for state in active[1:]:
        debt_id = state.debt.id
        owed = state.balance + interest[debt_id]
        reserve = min(max(state.debt.minimum_payment, interest[debt_id]), owed, remaining)
        payments[debt_id] = reserve
        remaining -= reserve

    for state in active:
        if remaining <= 0:
            break
        debt_id = state.debt.id
        owed = state.balance + interest[debt_id]
        extra = min(owed - payments[debt_id], remaining)
        payments[debt_id] += extra
        remaining -= extra

    return payments


def simulate_payoff(
    sorted_debts: List[DebtItem],
    monthly_payment: float,
    strategy: str,
    start_date: Optional[date] = None,
    max_months: int = MAX_MONTHS,
    paid_off_epsilon: float = PAID_OFF_EPSILON,
    interest_decimals: int = 0,
) -> PayoffPlan:
    """
    Project payoff of debts already sorted by strategy priority.

    Interest compounds monthly (annual rate / 12). Payment beyond interest
    reduces principal; unpaid interest is counted but not capitalized, so
    balances never grow. A debt at or below paid_off_epsilon is closed and
    leaves the active set.

    Stops when every debt is closed or after max_months; in the latter case
    the plan is returned with converged=False and months_to_debt_free equal
    to the cap.
    """
    today = start_date or date.today()
    debts = [d for d in sorted_debts if d.balance > 0]

    total_debt = sum(d.balance for d in debts)
    total_minimum = sum(d.minimum_payment for d in debts)

    if not debts:
        return PayoffPlan(
            strategy=strategy,
            total_debt=0.0,
            total_minimum_payment=0.0,
            recommended_payment=0.0,
            months_to_debt_free=0,
            total_interest_paid=0.0,
            debt_free_date=today,
        )

    # Per-request running state keyed by debt id
    states: Dict[str, SimulationState] = {d.id: SimulationState(debt=d, balance=d.balance) for d in debts}
    priority = [d.id for d in debts]

    breakdown: List[MonthlySnapshot] = []
    payoff_order: List[PayoffMilestone] = []
    total_interest = 0.0
    month = 0

    while month < max_months:
        active = [states[debt_id] for debt_id in priority if not states[debt_id].paid_off]
        if not active:
            break
        month += 1
        month_date = add_months(today, month)

        interest = {state.debt.id: state.balance * state.monthly_rate for state in active}
        payments = allocate_budget(active, interest, monthly_payment)
        total_interest += sum(interest.values())

        entries: Dict[str, DebtMonthEntry] = {}
        for state in active:
            debt_id = state.debt.id
            payment = payments[debt_id]
            principal = max(payment - interest[debt_id], 0.0)
            state.balance = max(state.balance - principal, 0.0)

            if state.balance <= paid_off_epsilon:
                state.balance = 0.0
                state.paid_off = True
                payoff_order.append(
                    PayoffMilestone(
                        debt_id=debt_id,
                        debt_name=state.debt.name,
                        payoff_month=month,
                        payoff_date=month_date,
                    )
                )

            entries[debt_id] = DebtMonthEntry(
                debt_id=debt_id,
                balance=state.balance,
                payment=payment,
                interest_paid=interest[debt_id],
                paid_off=state.paid_off,
            )

        breakdown.append(
            MonthlySnapshot(
                month=month,
                date=month_date,
                debts=[
                    entries.get(debt_id)
                    or DebtMonthEntry(debt_id=debt_id, balance=0.0, payment=0.0, interest_paid=0.0, paid_off=True)
                    for debt_id in priority
                ],
                remaining_debt=sum(s.balance for s in states.values() if not s.paid_off),
            )
        )

    converged = all(state.paid_off for state in states.values())

    return PayoffPlan(
        strategy=strategy,
        total_debt=total_debt,
        total_minimum_payment=total_minimum,
        recommended_payment=monthly_payment,
        months_to_debt_free=month,
        total_interest_paid=round(total_interest, interest_decimals),
        debt_free_date=add_months(today, month),
        monthly_breakdown=breakdown,
        debt_payoff_order=payoff_order,
        converged=converged,
    )
