"""Strategy comparison - simulate every strategy and recommend one"""

import asyncio
from datetime import date
from typing import Dict, List, Optional
from debt_planner.domain.models import (
    DebtItem,
    PayoffPlan,
    Recommendation,
    RecommendationRule,
    StrategyComparison,
)
from debt_planner.domain.simulation import MAX_MONTHS, PAID_OFF_EPSILON, simulate_payoff
from debt_planner.domain.strategies import DEFAULT_STRATEGY, available_strategies, sort_debts

DEFAULT_ACCELERATOR = 1.10  # Minimums plus 10%


def default_monthly_payment(debts: List[DebtItem], accelerator: float = DEFAULT_ACCELERATOR) -> float:
    """Budget used when the caller does not choose one"""
    return sum(d.minimum_payment for d in debts) * accelerator


def plan_for_strategy(
    debts: List[DebtItem],
    strategy: str,
    monthly_payment: Optional[float] = None,
    accelerator: float = DEFAULT_ACCELERATOR,
    start_date: Optional[date] = None,
    max_months: int = MAX_MONTHS,
    paid_off_epsilon: float = PAID_OFF_EPSILON,
    interest_decimals: int = 0,
) -> PayoffPlan:
    """
    Sort debts by strategy and simulate payoff.

    Raises:
        InvalidStrategyError: Before any simulation work
    """
    ordered = sort_debts(debts, strategy)
    payment = monthly_payment if monthly_payment else default_monthly_payment(debts, accelerator)
    return simulate_payoff(
        ordered,
        payment,
        strategy,
        start_date=start_date,
        max_months=max_months,
        paid_off_epsilon=paid_off_epsilon,
        interest_decimals=interest_decimals,
    )


def recommend(plans: Dict[str, PayoffPlan]) -> Recommendation:
    """
    Pick a strategy from simulated plans.

    Selection rules, in order:
    1. Lowest total interest paid
    2. On an interest tie, fewest months to debt free
    3. On a full tie, the default strategy (avalanche) when present
    """
    if not plans:
        return Recommendation(
            strategy=DEFAULT_STRATEGY,
            reason="No strategies to compare",
            rule=RecommendationRule.DEFAULT,
        )

    names = list(plans)
    if DEFAULT_STRATEGY in names:
        # Default first so min() keeps it on full ties
        names.remove(DEFAULT_STRATEGY)
        names.insert(0, DEFAULT_STRATEGY)

    lowest_interest = min(plans[n].total_interest_paid for n in names)
    interest_leaders = [n for n in names if plans[n].total_interest_paid == lowest_interest]

    if len(interest_leaders) == 1:
        best = interest_leaders[0]
        return Recommendation(
            strategy=best,
            reason=f"Lowest total interest paid ({plans[best].total_interest_paid:,.0f})",
            rule=RecommendationRule.LOWEST_INTEREST,
        )

    fewest_months = min(plans[n].months_to_debt_free for n in interest_leaders)
    month_leaders = [n for n in interest_leaders if plans[n].months_to_debt_free == fewest_months]

    if len(month_leaders) == 1:
        best = month_leaders[0]
        return Recommendation(
            strategy=best,
            reason=f"Ties on total interest; debt free soonest ({fewest_months} months)",
            rule=RecommendationRule.FEWEST_MONTHS,
        )

    best = month_leaders[0]
    return Recommendation(
        strategy=best,
        reason="Strategies tie on interest and payoff time; using the default strategy",
        rule=RecommendationRule.DEFAULT,
    )


def compare_strategies(
    debts: List[DebtItem],
    monthly_payment: Optional[float] = None,
    **options,
) -> StrategyComparison:
    """Run every registered strategy on the same budget and recommend one"""
    plans = {
        name: plan_for_strategy(debts, name, monthly_payment, **options)
        for name in available_strategies()
    }
    return StrategyComparison(strategies=plans, recommendation=recommend(plans))


async def compare_strategies_concurrently(
    debts: List[DebtItem],
    monthly_payment: Optional[float] = None,
    **options,
) -> StrategyComparison:
    """
    Same as compare_strategies, with each simulation in a worker thread.

    Simulations share no state, so they are gathered without ordering.
    Wrap in asyncio.wait_for to bound the call.
    """
    names = available_strategies()
    results = await asyncio.gather(
        *(
            asyncio.to_thread(plan_for_strategy, debts, name, monthly_payment, **options)
            for name in names
        )
    )
    plans = dict(zip(names, results))
    return StrategyComparison(strategies=plans, recommendation=recommend(plans))
