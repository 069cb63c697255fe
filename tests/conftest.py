"""Pytest fixtures for SmartPay client tests."""

import pytest

from smartpay.core.exceptions import TransportError
from smartpay.payments.client import SmartPayClient
from smartpay.payments.schemas import Credentials, TransportResponse
from smartpay.payments.transports.base import BaseTransport

MERCHANT_ID = "M1001"
SIGN_KEY = "test_sign_key"
API_URL = "https://smartpay.test/api/v1/info/smartpay"


class FakeTransport(BaseTransport):
    """Returns a canned response and records every call."""

    def __init__(
        self,
        status_code: int = 200,
        body: str = '{"code": 0}',
        error: TransportError | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.error = error
        self.calls: list[tuple[str, str, float]] = []

    async def send(self, url: str, query: str, timeout: float) -> TransportResponse:
        self.calls.append((url, query, timeout))
        if self.error is not None:
            raise self.error
        return TransportResponse(status_code=self.status_code, body=self.body)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(merchant_id=MERCHANT_ID, sign_key=SIGN_KEY)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(credentials, transport) -> SmartPayClient:
    return SmartPayClient(credentials, transport, api_url=API_URL, timeout=5.0)


@pytest.fixture
def miniapp_fields() -> dict:
    """Caller fields for a complete mini-app payment."""
    return {
        "increment_id": "ORDER-0001",
        "sub_appid": "wx1234567890",
        "sub_openid": "o_user_openid",
        "grandtotal": 100,
        "currency": "NZD",
        "payment_channels": "wechat",
        "notify_url": "https://shop.test/notify",
        "describe": "Coffee beans 250g",
    }
