"""httpx transport."""

import httpx

from smartpay.core.exceptions import TransportError
from smartpay.core.logging import get_logger
from smartpay.payments.schemas import TransportResponse
from smartpay.payments.transports.base import BaseTransport

logger = get_logger(__name__)


class HttpxTransport(BaseTransport):
    """HTTP transport backed by httpx."""

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = client

    async def send(self, url: str, query: str, timeout: float) -> TransportResponse:
        full_url = self.join_url(url, query)

        try:
            if self._client is not None:
                response = await self._client.get(full_url, timeout=timeout)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.get(full_url, timeout=timeout)
        except httpx.TimeoutException as e:
            logger.error(f"SmartPay request timed out after {timeout}s")
            raise TransportError("timeout") from e
        except httpx.HTTPError as e:
            logger.error(f"SmartPay request failed: {e}")
            raise TransportError(f"{type(e).__name__}: {e}") from e

        return TransportResponse(status_code=response.status_code, body=response.text)
