"""Signed request builder."""

from collections.abc import Mapping
from typing import Any

from smartpay.core.exceptions import MissingFieldsError
from smartpay.payments.schemas import Operation
from smartpay.payments.signature import (
    build_signed_query,
    normalize_fields,
    sign,
    strip_reserved,
)


class RequestBuilder:
    """Validates and signs requests for any SmartPay operation."""

    def __init__(self, secret_key: str) -> None:
        self._secret_key = secret_key

    @staticmethod
    def merge(
        caller_fields: Mapping[str, Any],
        preset_fields: Mapping[str, Any],
    ) -> dict[str, str]:
        """Merge presets over caller fields.

        Presets win on collision: merchant_id, service and nonce_str are
        always the client's own values.
        """
        return strip_reserved(
            {**normalize_fields(caller_fields), **normalize_fields(preset_fields)}
        )

    @staticmethod
    def missing_fields(operation: Operation, fields: Mapping[str, str]) -> list[str]:
        return [name for name in operation.required_fields if name not in fields]

    def build(
        self,
        operation: Operation,
        caller_fields: Mapping[str, Any],
        preset_fields: Mapping[str, Any],
    ) -> str:
        """Build the signed query string.

        Args:
            operation: Operation schema
            caller_fields: Fields supplied by the caller
            preset_fields: Service-mandated fields

        Returns:
            URL-encoded query string ending with signature and sign_type

        Raises:
            MissingFieldsError: If any required field is absent (lists all of them)
        """
        merged = self.merge(caller_fields, preset_fields)

        missing = self.missing_fields(operation, merged)
        if missing:
            raise MissingFieldsError(missing)

        signature = sign(merged, self._secret_key)
        return build_signed_query(merged, signature)
