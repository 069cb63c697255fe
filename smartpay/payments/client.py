"""SmartPay API client."""

import json
from collections.abc import Mapping
from typing import Any

from smartpay.core.config import settings
from smartpay.core.exceptions import ConfigurationError, MissingFieldsError, TransportError
from smartpay.core.logging import get_logger
from smartpay.payments.builder import RequestBuilder
from smartpay.payments.notifications import SignatureVerifier
from smartpay.payments.operations import CREATE_MINIAPP_PAY, CREATE_REDIRECT_PAY
from smartpay.payments.schemas import ApiResult, Credentials, Operation
from smartpay.payments.signature import random_string
from smartpay.payments.transports import BaseTransport, get_transport

logger = get_logger(__name__)


class SmartPayClient:
    """Client for the SmartPay aggregated payment API.

    Every operation follows the same sequence: build and sign the request,
    GET it, parse the JSON answer and map the outcome to an ApiResult.
    Only the operation schema and service code differ.
    """

    def __init__(
        self,
        credentials: Credentials,
        transport: BaseTransport,
        api_url: str | None = None,
        timeout: float | None = None,
        nonce_length: int | None = None,
    ) -> None:
        self.credentials = credentials
        self.transport = transport
        self.api_url = api_url if api_url is not None else settings.api_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.nonce_length = nonce_length if nonce_length is not None else settings.nonce_length

        sign_key = credentials.sign_key.get_secret_value()
        self._builder = RequestBuilder(sign_key)
        self._verifier = SignatureVerifier(sign_key)

    def preset_fields(self, operation: Operation) -> dict[str, str]:
        """Service-mandated fields; a fresh nonce on every call."""
        return {
            "merchant_id": self.credentials.merchant_id,
            "service": operation.service,
            "nonce_str": random_string(self.nonce_length),
        }

    async def execute(
        self,
        operation: Operation,
        fields: Mapping[str, Any],
        *,
        timeout: float | None = None,
    ) -> ApiResult:
        """Run one SmartPay operation.

        Args:
            operation: Operation schema and service code
            fields: Caller fields (merchant_id, service and nonce_str are set here)
            timeout: Per-call timeout override in seconds

        Returns:
            ApiResult; never raises for validation, transport or remote errors
        """
        try:
            query = self._builder.build(operation, fields, self.preset_fields(operation))
        except MissingFieldsError as e:
            logger.warning(f"{operation.name}: missing required fields {e.missing}")
            return ApiResult.validation_error(e.missing)

        logger.info(f"{operation.name} request: {query}")

        if timeout is None:
            timeout = self.timeout

        try:
            response = await self.transport.send(self.api_url, query, timeout)
        except TransportError as e:
            logger.error(f"{operation.name}: transport error: {e.detail}")
            return ApiResult.transport_error(e.detail)

        if not response.is_success:
            logger.error(
                f"{operation.name}: HTTP {response.status_code}, body: {response.body[:200]}"
            )
            return ApiResult.transport_error(f"HTTP {response.status_code}")

        try:
            data = json.loads(response.body)
        except json.JSONDecodeError:
            logger.error(f"{operation.name}: invalid JSON response: {response.body[:200]}")
            return ApiResult.malformed_response()

        logger.info(f"{operation.name} response: {data}")

        if not isinstance(data, dict) or "code" not in data:
            logger.error(f"{operation.name}: unexpected response shape")
            return ApiResult.malformed_response()

        if _is_success_code(data["code"]):
            return ApiResult.success(data)

        message = data.get("message")
        logger.warning(f"{operation.name} rejected: code={data['code']}, message={message}")
        return ApiResult.rejected(message, data)

    async def create_miniapp_pay(
        self,
        fields: Mapping[str, Any],
        *,
        timeout: float | None = None,
    ) -> ApiResult:
        """Create a mini-app payment (service create_miniapp_pay)."""
        return await self.execute(CREATE_MINIAPP_PAY, fields, timeout=timeout)

    async def create_redirect_pay(
        self,
        fields: Mapping[str, Any],
        *,
        timeout: float | None = None,
    ) -> ApiResult:
        """Create a redirect-page payment."""
        return await self.execute(CREATE_REDIRECT_PAY, fields, timeout=timeout)

    def verify_notification(self, received: Mapping[str, Any]) -> bool:
        """Check the signature of a notification sent by SmartPay."""
        return self._verifier.verify(received)

    @property
    def verifier(self) -> SignatureVerifier:
        return self._verifier


def _is_success_code(code: Any) -> bool:
    # Only the JSON integer 0 counts; "0", 0.0 and false do not
    return type(code) is int and code == 0


_client: SmartPayClient | None = None


def get_payment_client() -> SmartPayClient:
    """Get SmartPay client configured from settings (singleton)."""
    global _client
    if _client is None:
        if not settings.merchant_id or not settings.sign_key:
            raise ConfigurationError(
                "SMARTPAY_MERCHANT_ID and SMARTPAY_SIGN_KEY must be set"
            )
        _client = SmartPayClient(
            credentials=Credentials(
                merchant_id=settings.merchant_id,
                sign_key=settings.sign_key,
            ),
            transport=get_transport(),
        )
    return _client
