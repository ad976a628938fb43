"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from debt_planner.config import settings
from debt_planner.domain.aggregation import DebtSource
from debt_planner.infrastructure.clients.accounts import AccountsClient
from debt_planner.infrastructure.database.repositories import DatabaseDebtSource
from debt_planner.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_debt_source(db: Session = Depends(get_db)) -> DebtSource:
    """Provide the configured debt record source"""
    if settings.debt_source == "http":
        return AccountsClient()
    return DatabaseDebtSource(db)
