"""Payment processing module."""

from smartpay.payments.builder import RequestBuilder
from smartpay.payments.client import SmartPayClient, get_payment_client
from smartpay.payments.notifications import SignatureVerifier
from smartpay.payments.operations import CREATE_MINIAPP_PAY, CREATE_REDIRECT_PAY, OPERATIONS
from smartpay.payments.schemas import (
    ApiResult,
    Credentials,
    FieldSpec,
    Notification,
    Operation,
    ResultStatus,
)
from smartpay.payments.signature import random_string, sign, verify_signature

__all__ = [
    "ApiResult",
    "CREATE_MINIAPP_PAY",
    "CREATE_REDIRECT_PAY",
    "Credentials",
    "FieldSpec",
    "Notification",
    "OPERATIONS",
    "Operation",
    "RequestBuilder",
    "ResultStatus",
    "SignatureVerifier",
    "SmartPayClient",
    "get_payment_client",
    "random_string",
    "sign",
    "verify_signature",
]
