"""Base HTTP transport interface."""

from abc import ABC, abstractmethod

from smartpay.payments.schemas import TransportResponse


class BaseTransport(ABC):
    """Abstract HTTP transport used by SmartPayClient.

    Lets the client run against aiohttp, httpx or a local mock without
    changing the request protocol.
    """

    @abstractmethod
    async def send(self, url: str, query: str, timeout: float) -> TransportResponse:
        """Perform a GET request.

        Args:
            url: Endpoint without query string
            query: Prepared (already URL-encoded) query string
            timeout: Total timeout in seconds

        Returns:
            Status code and body, for any HTTP status

        Raises:
            TransportError: On connection errors and timeouts
        """

    @staticmethod
    def join_url(url: str, query: str) -> str:
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}{query}"
