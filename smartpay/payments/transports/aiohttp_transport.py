"""aiohttp transport."""

import asyncio

import aiohttp
from yarl import URL

from smartpay.core.exceptions import TransportError
from smartpay.core.logging import get_logger
from smartpay.payments.schemas import TransportResponse
from smartpay.payments.transports.base import BaseTransport

logger = get_logger(__name__)


class AiohttpTransport(BaseTransport):
    """HTTP transport backed by aiohttp.

    A session is opened per request unless one is passed in.
    """

    def __init__(self, session: aiohttp.ClientSession | None = None) -> None:
        self._session = session

    async def send(self, url: str, query: str, timeout: float) -> TransportResponse:
        # encoded=True: the query is signed as-is and must not be re-encoded
        full_url = URL(self.join_url(url, query), encoded=True)
        client_timeout = aiohttp.ClientTimeout(total=timeout)

        try:
            if self._session is not None:
                return await self._get(self._session, full_url, client_timeout)
            async with aiohttp.ClientSession() as session:
                return await self._get(session, full_url, client_timeout)
        except aiohttp.ClientError as e:
            logger.error(f"SmartPay request client error: {e}")
            raise TransportError(f"{type(e).__name__}: {e}") from e
        except asyncio.TimeoutError as e:
            logger.error(f"SmartPay request timed out after {timeout}s")
            raise TransportError("timeout") from e

    @staticmethod
    async def _get(
        session: aiohttp.ClientSession,
        url: URL,
        timeout: aiohttp.ClientTimeout,
    ) -> TransportResponse:
        async with session.get(url, timeout=timeout) as response:
            body = await response.text()
            return TransportResponse(status_code=response.status, body=body)
