"""Domain models - pure Python dataclasses representing debts and payoff plans"""

import math
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional


class DebtKind(str, Enum):
    """Source of a debt"""

    LOAN = "loan"
    REVOLVING_CREDIT = "credit_card"


@dataclass
class LoanRecord:
    """Active installment loan as stored (rate in whole-number percent)"""

    id: str
    name: str
    principal_outstanding: float
    interest_rate_percent: float
    minimum_payment: float = 0.0  # Smallest open installment
    payment_day: Optional[int] = None


@dataclass
class RevolvingCreditRecord:
    """Active credit card as stored (APR in whole-number percent)"""

    id: str
    name: str
    current_balance: float
    apr_percent: Optional[float] = None
    minimum_payment: Optional[float] = None
    payment_due_day: Optional[int] = None


@dataclass(frozen=True)
class DebtItem:
    """Unified representation of a loan or credit card debt"""

    id: str
    name: str
    kind: DebtKind
    balance: float
    annual_interest_rate: float  # Decimal fraction, 0.18 == 18% APR
    minimum_payment: float
    due_day_of_month: Optional[int] = None


@dataclass
class SimulationState:
    """Running state for one debt inside a single simulation call"""

    debt: DebtItem
    balance: float
    paid_off: bool = False

    @property
    def monthly_rate(self) -> float:
        return self.debt.annual_interest_rate / 12


@dataclass
class DebtMonthEntry:
    """One debt's position at the end of a simulated month"""

    debt_id: str
    balance: float
    payment: float
    interest_paid: float
    paid_off: bool


@dataclass
class MonthlySnapshot:
    """All debts at the end of a simulated month"""

    month: int
    date: date
    debts: List[DebtMonthEntry]
    remaining_debt: float


@dataclass
class PayoffMilestone:
    """Month in which a debt reached zero"""

    debt_id: str
    debt_name: str
    payoff_month: int
    payoff_date: date


@dataclass
class PayoffPlan:
    """Output of one simulation run"""

    strategy: str
    total_debt: float
    total_minimum_payment: float
    recommended_payment: float
    months_to_debt_free: int
    total_interest_paid: float
    debt_free_date: date
    monthly_breakdown: List[MonthlySnapshot] = field(default_factory=list)
    debt_payoff_order: List[PayoffMilestone] = field(default_factory=list)
    converged: bool = True  # False when the month cap was hit


@dataclass
class DebtSummary:
    """Point-in-time aggregate computed without simulation"""

    total_debt: float
    total_minimum_payment: float
    total_monthly_payment: float
    average_interest_rate: float
    debt_count: int
    highest_interest_rate: float
    lowest_interest_rate: float
    debt_free_months: float  # Whole months, or math.inf

    @property
    def pays_off_at_minimum(self) -> bool:
        return not math.isinf(self.debt_free_months)


class RecommendationRule(str, Enum):
    """Which selection rule picked the recommended strategy"""

    LOWEST_INTEREST = "lowest_interest"
    FEWEST_MONTHS = "fewest_months"
    DEFAULT = "default"


@dataclass
class Recommendation:
    strategy: str
    reason: str
    rule: RecommendationRule


@dataclass
class StrategyComparison:
    """Plans for every strategy plus the selected one"""

    strategies: Dict[str, PayoffPlan]
    recommendation: Recommendation
