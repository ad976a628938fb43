"""Payoff strategy registry and sorting"""

from dataclasses import dataclass
from typing import Callable, Dict, List
from debt_planner.domain.models import DebtItem
from debt_planner.domain.exceptions import InvalidStrategyError

SNOWBALL = "snowball"
AVALANCHE = "avalanche"
HIGHEST_BALANCE = "highest_balance"

DEFAULT_STRATEGY = AVALANCHE


@dataclass(frozen=True)
class PayoffStrategy:
    """Named ordering policy: debts sorted by key, optionally descending"""

    name: str
    key: Callable[[DebtItem], float]
    descending: bool
    description: str = ""

    def order(self, debts: List[DebtItem]) -> List[DebtItem]:
        # sorted() is stable for reverse=True as well, so ties keep input order
        return sorted(debts, key=self.key, reverse=self.descending)


_REGISTRY: Dict[str, PayoffStrategy] = {}


def register_strategy(
    name: str,
    key: Callable[[DebtItem], float],
    descending: bool = False,
    description: str = "",
) -> PayoffStrategy:
    """Add a strategy; comparison picks it up automatically"""
    strategy = PayoffStrategy(name=name, key=key, descending=descending, description=description)
    _REGISTRY[name] = strategy
    return strategy


def get_strategy(name: str) -> PayoffStrategy:
    try:
        return _REGISTRY[name]
    except KeyError:
        raise InvalidStrategyError(name) from None


def available_strategies() -> List[str]:
    """Strategy names in registration order"""
    return list(_REGISTRY)


def sort_debts(debts: List[DebtItem], strategy: str) -> List[DebtItem]:
    """
    Return a new list in payoff priority order.

    Raises:
        InvalidStrategyError: For unregistered strategy names
    """
    return get_strategy(strategy).order(debts)


register_strategy(
    SNOWBALL,
    key=lambda d: d.balance,
    description="Smallest balance first",
)
register_strategy(
    AVALANCHE,
    key=lambda d: d.annual_interest_rate,
    descending=True,
    description="Highest interest rate first",
)
register_strategy(
    HIGHEST_BALANCE,
    key=lambda d: d.balance,
    descending=True,
    description="Largest balance first",
)
