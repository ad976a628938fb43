"""Debt aggregation - normalize loans and credit cards into DebtItems"""

import logging
from typing import List, Protocol
from debt_planner.domain.models import DebtItem, DebtKind, LoanRecord, RevolvingCreditRecord

logger = logging.getLogger(__name__)

DEFAULT_MIN_PAYMENT_RATE = 0.03
DEFAULT_MIN_PAYMENT_FLOOR = 50.0


class DebtSource(Protocol):
    """Anything that can list a user's active loan and credit card records.

    Implementations raise DataUnavailableError when the records cannot be read.
    """

    async def fetch_loans(self, user_id: str) -> List[LoanRecord]: ...

    async def fetch_credit_cards(self, user_id: str) -> List[RevolvingCreditRecord]: ...


def revolving_minimum_payment(
    balance: float,
    rate: float = DEFAULT_MIN_PAYMENT_RATE,
    floor: float = DEFAULT_MIN_PAYMENT_FLOOR,
) -> float:
    """Card minimum when the issuer does not state one: max(rate * balance, floor)"""
    return max(balance * rate, floor)


def normalize_debts(
    loans: List[LoanRecord],
    cards: List[RevolvingCreditRecord],
    min_payment_rate: float = DEFAULT_MIN_PAYMENT_RATE,
    min_payment_floor: float = DEFAULT_MIN_PAYMENT_FLOOR,
) -> List[DebtItem]:
    """
    Convert raw source records into the unified DebtItem list.

    Requirements:
    - Drop records with no outstanding balance
    - Percent rates are divided by 100 (18 -> 0.18)
    - Cards without an explicit minimum get max(3% of balance, floor)

    Loans come first, then cards, each in source order.
    """
    debts: List[DebtItem] = []

    for loan in loans:
        if loan.principal_outstanding <= 0:
            continue
        debts.append(
            DebtItem(
                id=loan.id,
                name=loan.name,
                kind=DebtKind.LOAN,
                balance=loan.principal_outstanding,
                annual_interest_rate=max(loan.interest_rate_percent, 0.0) / 100,
                minimum_payment=loan.minimum_payment or 0.0,
                due_day_of_month=loan.payment_day,
            )
        )

    for card in cards:
        if card.current_balance <= 0:
            continue
        minimum = card.minimum_payment
        if minimum is None:
            minimum = revolving_minimum_payment(card.current_balance, min_payment_rate, min_payment_floor)
        debts.append(
            DebtItem(
                id=card.id,
                name=card.name,
                kind=DebtKind.REVOLVING_CREDIT,
                balance=card.current_balance,
                annual_interest_rate=max(card.apr_percent or 0.0, 0.0) / 100,
                minimum_payment=minimum,
                due_day_of_month=card.payment_due_day,
            )
        )

    return debts


async def aggregate_debts(
    source: DebtSource,
    user_id: str,
    min_payment_rate: float = DEFAULT_MIN_PAYMENT_RATE,
    min_payment_floor: float = DEFAULT_MIN_PAYMENT_FLOOR,
) -> List[DebtItem]:
    """
    Load every debt with a positive balance for a user.

    Raises:
        DataUnavailableError: Propagated from the source
    """
    loans = await source.fetch_loans(user_id)
    cards = await source.fetch_credit_cards(user_id)
    debts = normalize_debts(loans, cards, min_payment_rate, min_payment_floor)
    logger.debug(
        "Debts aggregated",
        extra={"user_id": user_id, "loan_count": len(loans), "card_count": len(cards), "debt_count": len(debts)},
    )
    return debts
