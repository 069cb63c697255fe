"""SmartPay aggregated payment API client."""

from smartpay.core.exceptions import (
    AppException,
    ConfigurationError,
    InvalidSignatureError,
    MissingFieldsError,
    TransportError,
)
from smartpay.payments import (
    ApiResult,
    Credentials,
    ResultStatus,
    SignatureVerifier,
    SmartPayClient,
    get_payment_client,
)

__version__ = "0.1.0"

__all__ = [
    "ApiResult",
    "AppException",
    "ConfigurationError",
    "Credentials",
    "InvalidSignatureError",
    "MissingFieldsError",
    "ResultStatus",
    "SignatureVerifier",
    "SmartPayClient",
    "TransportError",
    "get_payment_client",
]
