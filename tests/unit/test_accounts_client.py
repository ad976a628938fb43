"""Unit tests for the accounts API client"""

import httpx
import pytest
from debt_planner.infrastructure.clients.accounts import AccountsClient
from debt_planner.domain.exceptions import DataUnavailableError


def _client(handler) -> AccountsClient:
    return AccountsClient(base_url="http://accounts.test", timeout=1.0, transport=httpx.MockTransport(handler))


async def test_fetch_loans_parses_records():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/accounts/loans"
        assert request.url.params["user_id"] == "user_1"
        return httpx.Response(
            200,
            json={
                "loans": [
                    {
                        "id": "loan_1",
                        "name": "Mortgage",
                        "principal_outstanding": 150000,
                        "interest_rate": 7.5,
                        "minimum_payment": 1200,
                        "payment_day": 10,
                    }
                ]
            },
        )

    loans = await _client(handler).fetch_loans("user_1")

    assert len(loans) == 1
    assert loans[0].id == "loan_1"
    assert loans[0].interest_rate_percent == 7.5
    assert loans[0].minimum_payment == 1200
    assert loans[0].payment_day == 10


async def test_fetch_credit_cards_keeps_missing_minimum_as_none():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/accounts/credit-cards"
        return httpx.Response(
            200,
            json={"credit_cards": [{"id": 7, "name": "Visa", "current_balance": 2500, "apr": None}]},
        )

    cards = await _client(handler).fetch_credit_cards("user_1")

    assert cards[0].id == "7"
    assert cards[0].apr_percent is None
    assert cards[0].minimum_payment is None


async def test_http_error_is_data_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"detail": "boom"})

    with pytest.raises(DataUnavailableError, match="500"):
        await _client(handler).fetch_loans("user_1")


async def test_timeout_is_data_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    with pytest.raises(DataUnavailableError, match="timeout"):
        await _client(handler).fetch_credit_cards("user_1")


async def test_connection_error_is_data_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(DataUnavailableError, match="unreachable"):
        await _client(handler).fetch_loans("user_1")


async def test_malformed_record_is_data_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"loans": [{"id": "loan_1", "name": "No balance"}]})

    with pytest.raises(DataUnavailableError, match="Invalid loan data"):
        await _client(handler).fetch_loans("user_1")


async def test_invalid_json_is_data_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>maintenance</html>")

    with pytest.raises(DataUnavailableError, match="Invalid JSON"):
        await _client(handler).fetch_loans("user_1")
