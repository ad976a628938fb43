"""SQLAlchemy ORM models for the account, loan and credit card store"""

import uuid
from sqlalchemy import Column, String, Boolean, Float, DateTime, Date, Integer, ForeignKey, Text
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


class FinancialAccount(Base):
    """User-owned account; loans and cards hang off it"""

    __tablename__ = "financial_accounts"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    type = Column(Text, nullable=False)  # CHECKING | SAVINGS | CREDIT_CARD | LOAN | ...
    currency = Column(Text, nullable=False, default="VND")
    institution_name = Column(Text, nullable=True)
    is_archived = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    loan = relationship("Loan", back_populates="account", uselist=False, cascade="all, delete-orphan")
    credit_cards = relationship("CreditCard", back_populates="account", cascade="all, delete-orphan")


class Loan(Base):
    """Installment loan terms; rate stored as a whole-number percent"""

    __tablename__ = "loans"

    account_id = Column(String(36), ForeignKey("financial_accounts.id", ondelete="CASCADE"), primary_key=True)
    principal_original = Column(Float, nullable=False)
    principal_outstanding = Column(Float, nullable=False)
    current_interest_rate = Column(Float, nullable=False)
    term_months = Column(Integer, nullable=True)
    payment_day_of_month = Column(Integer, nullable=True)
    lender_name = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    account = relationship("FinancialAccount", back_populates="loan")
    installments = relationship("LoanInstallment", back_populates="loan", cascade="all, delete-orphan")


class LoanInstallment(Base):
    """Scheduled loan payment"""

    __tablename__ = "loan_installments"

    id = Column(String(36), primary_key=True, default=_new_id)
    loan_id = Column(String(36), ForeignKey("loans.account_id", ondelete="CASCADE"), nullable=False, index=True)
    due_date = Column(Date, nullable=False)
    installment_number = Column(Integer, nullable=False)
    total_amount = Column(Float, nullable=False)
    status = Column(Text, nullable=False, default="ESTIMATED")  # ESTIMATED | DUE | PAID | OVERDUE | WAIVED

    loan = relationship("Loan", back_populates="installments")


class CreditCard(Base):
    """Revolving credit line; APR stored as a whole-number percent"""

    __tablename__ = "credit_cards"

    id = Column(String(36), primary_key=True, default=_new_id)
    account_id = Column(String(36), ForeignKey("financial_accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    current_balance = Column(Float, nullable=False, default=0.0)
    credit_limit = Column(Float, nullable=True)
    apr = Column(Float, nullable=True)
    minimum_payment = Column(Float, nullable=True)  # Issuer-stated minimum, if known
    payment_due_day = Column(Integer, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    account = relationship("FinancialAccount", back_populates="credit_cards")
