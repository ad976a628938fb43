"""Accounts service HTTP client for fetching loan and credit card records"""

import httpx
from typing import Any, Dict, List, Optional
from debt_planner.domain.models import LoanRecord, RevolvingCreditRecord
from debt_planner.domain.exceptions import DataUnavailableError
from debt_planner.config import settings


class AccountsClient:
    """Client for the external accounts API; implements DebtSource"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.accounts_api_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def _get(self, path: str, user_id: str) -> Dict[str, Any]:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(f"{self.base_url}{path}", params={"user_id": user_id})
                response.raise_for_status()
                return response.json()

            except httpx.TimeoutException as e:
                raise DataUnavailableError(f"Accounts API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise DataUnavailableError(f"Accounts API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise DataUnavailableError(f"Accounts API unreachable: {e.__class__.__name__}") from e
            except ValueError as e:
                raise DataUnavailableError(f"Invalid JSON from accounts API: {e}") from e

    async def fetch_loans(self, user_id: str) -> List[LoanRecord]:
        """
        Fetch active loans for a user.

        Raises:
            DataUnavailableError: On timeout, HTTP errors, or invalid response
        """
        data = await self._get("/accounts/loans", user_id)
        try:
            return [
                LoanRecord(
                    id=str(loan["id"]),
                    name=loan["name"],
                    principal_outstanding=float(loan["principal_outstanding"]),
                    interest_rate_percent=float(loan["interest_rate"]),
                    minimum_payment=float(loan.get("minimum_payment") or 0.0),
                    payment_day=loan.get("payment_day"),
                )
                for loan in data.get("loans", [])
            ]
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise DataUnavailableError(f"Invalid loan data from accounts API: {e}") from e

    async def fetch_credit_cards(self, user_id: str) -> List[RevolvingCreditRecord]:
        """
        Fetch active credit cards for a user.

        Raises:
            DataUnavailableError: On timeout, HTTP errors, or invalid response
        """
        data = await self._get("/accounts/credit-cards", user_id)
        try:
            return [
                RevolvingCreditRecord(
                    id=str(card["id"]),
                    name=card["name"],
                    current_balance=float(card["current_balance"]),
                    apr_percent=float(card["apr"]) if card.get("apr") is not None else None,
                    minimum_payment=(
                        float(card["minimum_payment"]) if card.get("minimum_payment") is not None else None
                    ),
                    payment_due_day=card.get("payment_due_day"),
                )
                for card in data.get("credit_cards", [])
            ]
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise DataUnavailableError(f"Invalid credit card data from accounts API: {e}") from e
