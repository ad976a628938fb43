"""Data access layer for loan and credit card records"""

from typing import List
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from debt_planner.infrastructure.database.models import CreditCard, FinancialAccount, Loan, LoanInstallment
from debt_planner.domain.models import LoanRecord, RevolvingCreditRecord
from debt_planner.domain.exceptions import DataUnavailableError

OPEN_INSTALLMENT_STATUSES = ("ESTIMATED", "DUE")


class DebtRecordRepository:
    """Repository for a user's active loans and credit cards"""

    def __init__(self, db: Session):
        self.db = db

    def get_active_loans(self, user_id: str) -> List[LoanRecord]:
        """Active loans with outstanding principal; minimum = smallest open installment"""
        next_installment = (
            self.db.query(
                LoanInstallment.loan_id.label("loan_id"),
                func.min(LoanInstallment.total_amount).label("total_amount"),
            )
            .filter(LoanInstallment.status.in_(OPEN_INSTALLMENT_STATUSES))
            .group_by(LoanInstallment.loan_id)
            .subquery()
        )

        rows = (
            self.db.query(Loan, FinancialAccount.name, next_installment.c.total_amount)
            .join(FinancialAccount, Loan.account_id == FinancialAccount.id)
            .outerjoin(next_installment, Loan.account_id == next_installment.c.loan_id)
            .filter(
                FinancialAccount.user_id == user_id,
                Loan.is_active.is_(True),
                Loan.principal_outstanding > 0,
            )
            .order_by(FinancialAccount.name, Loan.account_id)
            .all()
        )

        return [
            LoanRecord(
                id=loan.account_id,
                name=name,
                principal_outstanding=loan.principal_outstanding,
                interest_rate_percent=loan.current_interest_rate,
                minimum_payment=minimum or 0.0,
                payment_day=loan.payment_day_of_month,
            )
            for loan, name, minimum in rows
        ]

    def get_active_credit_cards(self, user_id: str) -> List[RevolvingCreditRecord]:
        """Active cards carrying a balance"""
        rows = (
            self.db.query(CreditCard, FinancialAccount.name)
            .join(FinancialAccount, CreditCard.account_id == FinancialAccount.id)
            .filter(
                FinancialAccount.user_id == user_id,
                CreditCard.is_active.is_(True),
                CreditCard.current_balance > 0,
            )
            .order_by(FinancialAccount.name, CreditCard.id)
            .all()
        )

        return [
            RevolvingCreditRecord(
                id=card.id,
                name=name,
                current_balance=card.current_balance,
                apr_percent=card.apr,
                minimum_payment=card.minimum_payment,
                payment_due_day=card.payment_due_day,
            )
            for card, name in rows
        ]


class DatabaseDebtSource:
    """DebtSource backed by the local store"""

    def __init__(self, db: Session):
        self.repository = DebtRecordRepository(db)

    async def fetch_loans(self, user_id: str) -> List[LoanRecord]:
        """
        Raises:
            DataUnavailableError: When the store cannot be queried
        """
        try:
            return self.repository.get_active_loans(user_id)
        except SQLAlchemyError as e:
            raise DataUnavailableError(f"Loan records unavailable: {e.__class__.__name__}") from e

    async def fetch_credit_cards(self, user_id: str) -> List[RevolvingCreditRecord]:
        """
        Raises:
            DataUnavailableError: When the store cannot be queried
        """
        try:
            return self.repository.get_active_credit_cards(user_id)
        except SQLAlchemyError as e:
            raise DataUnavailableError(f"Credit card records unavailable: {e.__class__.__name__}") from e
