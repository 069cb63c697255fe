"""
HTTP transports: aiohttp, httpx and the local mock service.
"""

import asyncio
import json

import httpx
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from conftest import API_URL, MERCHANT_ID, SIGN_KEY
from smartpay.core.exceptions import TransportError
from smartpay.payments.builder import RequestBuilder
from smartpay.payments.client import SmartPayClient
from smartpay.payments.operations import CREATE_MINIAPP_PAY
from smartpay.payments.schemas import Operation, ResultStatus, TransportResponse
from smartpay.payments.signature import verify_signature
from smartpay.payments.transports.aiohttp_transport import AiohttpTransport
from smartpay.payments.transports.base import BaseTransport
from smartpay.payments.transports.httpx_transport import HttpxTransport
from smartpay.payments.transports.mock import (
    CODE_BAD_SIGNATURE,
    CODE_UNKNOWN_MERCHANT,
    CODE_UNKNOWN_SERVICE,
    MockTransport,
)

pytestmark = [pytest.mark.asyncio]

QUERY = "describe=Coffee+%26+tea&grandtotal=100&signature=abc&sign_type=MD5"


def signed_query(fields: dict, operation: Operation = CREATE_MINIAPP_PAY, key: str = SIGN_KEY) -> str:
    presets = {"merchant_id": MERCHANT_ID, "service": operation.service, "nonce_str": "n0nce"}
    return RequestBuilder(key).build(operation, fields, presets)


class TestJoinUrl:
    """Query string appended to the endpoint."""

    async def test_plain_url(self):
        assert BaseTransport.join_url("https://a.test/api", "x=1") == "https://a.test/api?x=1"

    async def test_url_with_query(self):
        assert BaseTransport.join_url("https://a.test/api?v=2", "x=1") == "https://a.test/api?v=2&x=1"


class TestHttpxTransport:
    """HttpxTransport against httpx.MockTransport."""

    async def test_sends_query_verbatim(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["query"] = request.url.query
            return httpx.Response(200, text='{"code":0}')

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            response = await HttpxTransport(http).send(API_URL, QUERY, 5.0)

        assert response == TransportResponse(status_code=200, body='{"code":0}')
        assert seen["method"] == "GET"
        assert seen["query"] == QUERY.encode()

    async def test_error_status_returned(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            response = await HttpxTransport(http).send(API_URL, QUERY, 5.0)

        assert response.status_code == 502
        assert not response.is_success

    async def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            with pytest.raises(TransportError) as exc_info:
                await HttpxTransport(http).send(API_URL, QUERY, 0.1)

        assert exc_info.value.detail == "timeout"

    async def test_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            with pytest.raises(TransportError) as exc_info:
                await HttpxTransport(http).send(API_URL, QUERY, 5.0)

        assert exc_info.value.detail.startswith("ConnectError")


class TestAiohttpTransport:
    """AiohttpTransport against a local aiohttp server."""

    @staticmethod
    def make_app(handler) -> web.Application:
        app = web.Application()
        app.router.add_get("/api/v1/info/smartpay", handler)
        return app

    async def test_sends_query_verbatim(self):
        seen = {}

        async def handler(request: web.Request) -> web.Response:
            seen["query"] = request.rel_url.raw_query_string
            return web.json_response({"code": 0, "foo": "bar"})

        async with TestServer(self.make_app(handler)) as server:
            url = str(server.make_url("/api/v1/info/smartpay"))
            response = await AiohttpTransport().send(url, QUERY, 5.0)

        assert response.status_code == 200
        assert json.loads(response.body) == {"code": 0, "foo": "bar"}
        assert seen["query"] == QUERY

    async def test_error_status_returned(self):
        async def handler(request: web.Request) -> web.Response:
            return web.Response(status=500, text="boom")

        async with TestServer(self.make_app(handler)) as server:
            url = str(server.make_url("/api/v1/info/smartpay"))
            response = await AiohttpTransport().send(url, QUERY, 5.0)

        assert response == TransportResponse(status_code=500, body="boom")

    async def test_timeout(self):
        async def handler(request: web.Request) -> web.Response:
            await asyncio.sleep(0.5)
            return web.json_response({"code": 0})

        async with TestServer(self.make_app(handler)) as server:
            url = str(server.make_url("/api/v1/info/smartpay"))
            with pytest.raises(TransportError):
                await AiohttpTransport().send(url, QUERY, 0.05)

    async def test_connection_refused(self):
        with pytest.raises(TransportError):
            await AiohttpTransport().send("http://127.0.0.1:1/api", QUERY, 2.0)

    async def test_client_end_to_end(self, credentials, miniapp_fields):
        seen = {}

        async def handler(request: web.Request) -> web.Response:
            seen["params"] = dict(request.query)
            return web.json_response({"code": 7, "message": "insufficient balance"})

        async with TestServer(self.make_app(handler)) as server:
            client = SmartPayClient(
                credentials,
                AiohttpTransport(),
                api_url=str(server.make_url("/api/v1/info/smartpay")),
            )
            result = await client.create_miniapp_pay({**miniapp_fields, "describe": "Coffee & tea"})

        assert result.status is ResultStatus.REJECTED
        assert result.message == "insufficient balance"
        assert seen["params"]["describe"] == "Coffee & tea"
        assert verify_signature(seen["params"], SIGN_KEY)


class TestMockTransport:
    """Local SmartPay simulator."""

    @pytest.fixture
    def mock_service(self) -> MockTransport:
        return MockTransport(merchant_id=MERCHANT_ID, sign_key=SIGN_KEY)

    async def test_accepts_valid_request(self, mock_service, miniapp_fields):
        response = await mock_service.send(API_URL, signed_query(miniapp_fields), 5.0)
        data = json.loads(response.body)

        assert response.status_code == 200
        assert data["code"] == 0
        assert data["increment_id"] == "ORDER-0001"
        assert verify_signature(data, SIGN_KEY)
        assert mock_service.requests[0]["describe"] == "Coffee beans 250g"

    async def test_rejects_bad_signature(self, mock_service, miniapp_fields):
        query = signed_query(miniapp_fields, key="wrong_key")

        data = json.loads((await mock_service.send(API_URL, query, 5.0)).body)

        assert data["code"] == CODE_BAD_SIGNATURE

    async def test_rejects_unknown_merchant(self, miniapp_fields):
        mock_service = MockTransport(merchant_id="OTHER", sign_key=SIGN_KEY)

        data = json.loads((await mock_service.send(API_URL, signed_query(miniapp_fields), 5.0)).body)

        assert data["code"] == CODE_UNKNOWN_MERCHANT

    async def test_rejects_unknown_service(self, mock_service):
        refund = Operation(name="refund", service="refund", fields=())

        data = json.loads((await mock_service.send(API_URL, signed_query({}, refund), 5.0)).body)

        assert data["code"] == CODE_UNKNOWN_SERVICE
        assert data["message"] == "unknown service"

    async def test_client_success_and_rejection(self, credentials, mock_service, miniapp_fields):
        client = SmartPayClient(credentials, mock_service, api_url=API_URL)

        accepted = await client.create_miniapp_pay(miniapp_fields)
        other_merchant = SmartPayClient(
            credentials.model_copy(update={"merchant_id": "OTHER"}),
            mock_service,
            api_url=API_URL,
        )
        rejected = await other_merchant.create_miniapp_pay(miniapp_fields)

        assert accepted.ok
        assert client.verify_notification(accepted.payload)
        assert rejected.status is ResultStatus.REJECTED
        assert rejected.message == "unknown merchant"
