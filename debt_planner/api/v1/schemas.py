"""Pydantic schemas for API responses"""

import datetime
import math
from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from debt_planner.domain.models import DebtItem, DebtSummary, PayoffPlan, StrategyComparison


class DebtItemSchema(BaseModel):
    """Single aggregated debt"""

    id: str
    name: str
    type: str  # loan | credit_card
    balance: float
    interest_rate: float = Field(..., description="Annual rate as a decimal fraction")
    minimum_payment: float
    due_day_of_month: Optional[int] = None

    @classmethod
    def from_domain(cls, debt: DebtItem) -> "DebtItemSchema":
        return cls(
            id=debt.id,
            name=debt.name,
            type=debt.kind.value,
            balance=debt.balance,
            interest_rate=debt.annual_interest_rate,
            minimum_payment=debt.minimum_payment,
            due_day_of_month=debt.due_day_of_month,
        )


class DebtListResponse(BaseModel):
    """Response for GET /v1/debts"""

    user_id: str
    debts: List[DebtItemSchema]


class DebtSummaryResponse(BaseModel):
    """Response for GET /v1/debts/summary"""

    user_id: str
    total_debt: float
    total_minimum_payment: float
    total_monthly_payment: float
    average_interest_rate: float
    debt_count: int
    highest_interest_rate: float
    lowest_interest_rate: float
    debt_free_months: Optional[int] = Field(
        None, description="Months at minimum payments; null when some debt never pays off"
    )
    pays_off_at_minimum: bool

    @classmethod
    def from_domain(cls, user_id: str, summary: DebtSummary) -> "DebtSummaryResponse":
        infinite = math.isinf(summary.debt_free_months)
        return cls(
            user_id=user_id,
            total_debt=summary.total_debt,
            total_minimum_payment=summary.total_minimum_payment,
            total_monthly_payment=summary.total_monthly_payment,
            average_interest_rate=summary.average_interest_rate,
            debt_count=summary.debt_count,
            highest_interest_rate=summary.highest_interest_rate,
            lowest_interest_rate=summary.lowest_interest_rate,
            debt_free_months=None if infinite else int(summary.debt_free_months),
            pays_off_at_minimum=not infinite,
        )


class DebtMonthSchema(BaseModel):
    debt_id: str
    balance: float
    payment: float
    interest_paid: float
    paid_off: bool


class MonthlySnapshotSchema(BaseModel):
    """One simulated month"""

    month: int
    date: datetime.date
    debts: List[DebtMonthSchema]
    remaining_debt: float


class PayoffMilestoneSchema(BaseModel):
    debt_id: str
    debt_name: str
    payoff_month: int
    payoff_date: datetime.date


class PayoffPlanResponse(BaseModel):
    """Response for GET /v1/debts/plan"""

    strategy: str
    total_debt: float
    total_minimum_payment: float
    recommended_payment: float
    months_to_debt_free: int
    total_interest_paid: float
    debt_free_date: datetime.date
    converged: bool = Field(..., description="False when the projection hit the month cap")
    monthly_breakdown: List[MonthlySnapshotSchema]
    debt_payoff_order: List[PayoffMilestoneSchema]

    @classmethod
    def from_domain(cls, plan: PayoffPlan) -> "PayoffPlanResponse":
        return cls(
            strategy=plan.strategy,
            total_debt=plan.total_debt,
            total_minimum_payment=plan.total_minimum_payment,
            recommended_payment=plan.recommended_payment,
            months_to_debt_free=plan.months_to_debt_free,
            total_interest_paid=plan.total_interest_paid,
            debt_free_date=plan.debt_free_date,
            converged=plan.converged,
            monthly_breakdown=[
                MonthlySnapshotSchema(
                    month=snapshot.month,
                    date=snapshot.date,
                    debts=[DebtMonthSchema(**vars(entry)) for entry in snapshot.debts],
                    remaining_debt=snapshot.remaining_debt,
                )
                for snapshot in plan.monthly_breakdown
            ],
            debt_payoff_order=[PayoffMilestoneSchema(**vars(m)) for m in plan.debt_payoff_order],
        )


class RecommendationSchema(BaseModel):
    strategy: str
    reason: str
    rule: str


class ComparisonResponse(BaseModel):
    """Response for GET /v1/debts/compare"""

    user_id: str
    strategies: Dict[str, PayoffPlanResponse]
    recommendation: RecommendationSchema

    @classmethod
    def from_domain(cls, user_id: str, comparison: StrategyComparison) -> "ComparisonResponse":
        rec = comparison.recommendation
        return cls(
            user_id=user_id,
            strategies={name: PayoffPlanResponse.from_domain(plan) for name, plan in comparison.strategies.items()},
            recommendation=RecommendationSchema(strategy=rec.strategy, reason=rec.reason, rule=rec.rule.value),
        )
