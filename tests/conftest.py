"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Generator, List, Optional
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from debt_planner.api.main import create_app
from debt_planner.infrastructure.database.models import (
    Base,
    CreditCard,
    FinancialAccount,
    Loan,
    LoanInstallment,
)
from debt_planner.infrastructure.database.session import get_db
from debt_planner.domain.models import DebtItem, DebtKind


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

START = date(2024, 11, 15)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


class DebtStore:
    """Seeds loans and credit cards the way the accounts app stores them"""

    def __init__(self, db: Session):
        self.db = db

    def add_loan(
        self,
        user_id: str,
        name: str,
        balance: float,
        rate_percent: float,
        installments: Optional[List[tuple]] = None,
        is_active: bool = True,
        payment_day: Optional[int] = None,
    ) -> str:
        account = FinancialAccount(user_id=user_id, name=name, type="LOAN")
        self.db.add(account)
        self.db.flush()
        loan = Loan(
            account_id=account.id,
            principal_original=balance,
            principal_outstanding=balance,
            current_interest_rate=rate_percent,
            payment_day_of_month=payment_day,
            is_active=is_active,
        )
        self.db.add(loan)
        for number, (amount, status) in enumerate(installments or [], start=1):
            self.db.add(
                LoanInstallment(
                    loan_id=account.id,
                    due_date=date(2025, number, 1),
                    installment_number=number,
                    total_amount=amount,
                    status=status,
                )
            )
        self.db.commit()
        return account.id

    def add_card(
        self,
        user_id: str,
        name: str,
        balance: float,
        apr: Optional[float],
        minimum_payment: Optional[float] = None,
        is_active: bool = True,
        payment_due_day: Optional[int] = None,
    ) -> str:
        account = FinancialAccount(user_id=user_id, name=name, type="CREDIT_CARD")
        self.db.add(account)
        self.db.flush()
        card = CreditCard(
            account_id=account.id,
            current_balance=balance,
            apr=apr,
            minimum_payment=minimum_payment,
            payment_due_day=payment_due_day,
            is_active=is_active,
        )
        self.db.add(card)
        self.db.commit()
        return card.id


@pytest.fixture
def store(db: Session) -> DebtStore:
    return DebtStore(db)


def make_debt(
    debt_id: str,
    balance: float,
    rate: float,
    minimum: float,
    kind: DebtKind = DebtKind.LOAN,
) -> DebtItem:
    return DebtItem(
        id=debt_id,
        name=debt_id.title(),
        kind=kind,
        balance=balance,
        annual_interest_rate=rate,
        minimum_payment=minimum,
    )


@pytest.fixture
def debt_factory():
    """Build DebtItems with short positional arguments"""
    return make_debt


@pytest.fixture
def start_date() -> date:
    return START


@pytest.fixture
def two_debts() -> List[DebtItem]:
    """Debt A: small balance, low rate. Debt B: large balance, high rate."""
    return [
        make_debt("debt_a", 500_000, 0.06, 25_000),
        make_debt("debt_b", 2_000_000, 0.24, 60_000),
    ]
