"""HTTP transports module."""

from smartpay.payments.transports.base import BaseTransport


def get_transport(name: str | None = None) -> BaseTransport:
    """Factory function to get configured transport.

    Returns transport based on SMARTPAY_TRANSPORT setting.
    """
    from smartpay.core.config import settings

    name = name or settings.transport

    if name == "aiohttp":
        from smartpay.payments.transports.aiohttp_transport import AiohttpTransport

        return AiohttpTransport()

    if name == "httpx":
        from smartpay.payments.transports.httpx_transport import HttpxTransport

        return HttpxTransport()

    if name == "mock":
        from smartpay.payments.transports.mock import MockTransport

        return MockTransport(merchant_id=settings.merchant_id, sign_key=settings.sign_key)

    raise ValueError(f"Unknown transport: {name}")


__all__ = [
    "BaseTransport",
    "get_transport",
]
