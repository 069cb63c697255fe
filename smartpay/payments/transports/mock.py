"""Mock SmartPay transport."""

import json
from urllib.parse import parse_qsl, urlsplit

from smartpay.core.logging import get_logger
from smartpay.payments.operations import OPERATIONS
from smartpay.payments.schemas import TransportResponse
from smartpay.payments.signature import random_string, sign, verify_signature
from smartpay.payments.transports.base import BaseTransport

logger = get_logger(__name__)

# Rejection codes returned by the mock service
CODE_BAD_SIGNATURE = 1001
CODE_UNKNOWN_MERCHANT = 1002
CODE_UNKNOWN_SERVICE = 1003

SERVICES = frozenset(op.service for op in OPERATIONS.values())


class MockTransport(BaseTransport):
    """Local stand-in for the SmartPay service.

    Checks merchant_id and signature the same way the real service does and
    answers with a signed JSON body, without any network access.
    """

    def __init__(self, merchant_id: str, sign_key: str) -> None:
        self.merchant_id = merchant_id
        self.sign_key = sign_key
        self.requests: list[dict[str, str]] = []

    async def send(self, url: str, query: str, timeout: float) -> TransportResponse:
        embedded = urlsplit(url).query
        raw = f"{embedded}&{query}" if embedded else query
        params = dict(parse_qsl(raw, keep_blank_values=True))
        self.requests.append(params)

        logger.info(
            f"Mock SmartPay request: service={params.get('service')}, "
            f"increment_id={params.get('increment_id')}"
        )

        if not verify_signature(params, self.sign_key):
            return self._reply({"code": CODE_BAD_SIGNATURE, "message": "signature error"})
        if params.get("merchant_id") != self.merchant_id:
            return self._reply({"code": CODE_UNKNOWN_MERCHANT, "message": "unknown merchant"})
        if params.get("service") not in SERVICES:
            return self._reply({"code": CODE_UNKNOWN_SERVICE, "message": "unknown service"})

        payload = {
            "code": 0,
            "merchant_id": self.merchant_id,
            "increment_id": params.get("increment_id", ""),
            "transaction_id": random_string(24),
            "nonce_str": random_string(16),
        }
        payload["signature"] = sign({k: str(v) for k, v in payload.items()}, self.sign_key)
        payload["sign_type"] = "MD5"
        return self._reply(payload)

    @staticmethod
    def _reply(payload: dict) -> TransportResponse:
        return TransportResponse(status_code=200, body=json.dumps(payload))
