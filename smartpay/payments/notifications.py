"""Inbound notification (webhook) verification."""

from collections.abc import Mapping
from typing import Any

from smartpay.core.exceptions import InvalidSignatureError
from smartpay.core.logging import get_logger
from smartpay.payments.schemas import Notification
from smartpay.payments.signature import normalize_fields, verify_signature

logger = get_logger(__name__)


class SignatureVerifier:
    """Checks signatures on payloads received from SmartPay."""

    def __init__(self, secret_key: str) -> None:
        self._secret_key = secret_key

    def verify(self, received: Mapping[str, Any]) -> bool:
        """Return True if `received` carries a valid signature.

        A missing or wrong signature is an expected outcome, not an error.
        """
        return verify_signature(received, self._secret_key)

    def parse(self, raw_data: Mapping[str, Any]) -> Notification:
        """Verify and parse a notification payload.

        Raises:
            InvalidSignatureError: If the signature is missing or wrong
        """
        if not self.verify(raw_data):
            logger.warning(
                f"Invalid notification signature: increment_id={raw_data.get('increment_id')}"
            )
            raise InvalidSignatureError()

        return Notification.model_validate(normalize_fields(raw_data))
