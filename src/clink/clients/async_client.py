"""
Asynchronous clink client backed by ``httpx.AsyncClient``.
"""

import logging
from typing import Any

import httpx

from .base import BaseClient
from ..retry import Outcome, Sent, Failed

logger = logging.getLogger(__name__)


class AsyncClient(BaseClient):
    """
    Async counterpart of ``Client`` with the same request loop.

    The rate limiter may be shared with sync clients; waits suspend the task
    instead of blocking the event loop.
    """

    http_client: httpx.AsyncClient | None

    def _default_http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient()

    async def _send(self, request: httpx.Request) -> Outcome:
        if self.http_client is None:
            return self._missing_transport()
        logger.debug(f"Sending {request.method} {request.url}")
        try:
            return Sent(await self.http_client.send(request))
        except httpx.HTTPError as e:
            return Failed(e)

    async def do(self, request: httpx.Request) -> httpx.Response:
        """Send ``request`` with retries. See ``Client.do``."""
        attempt = 0
        while True:
            self._apply_headers(request)
            if self.rate_limiter is not None:
                await self.rate_limiter.wait_async()

            outcome = await self._send(request)
            try:
                retry = self._wants_retry(request, outcome, attempt)
            except Exception:
                if isinstance(outcome, Sent):
                    await outcome.response.aclose()
                raise
            if not retry:
                return outcome.unwrap()

            attempt += 1
            self._log_retry(request, outcome, attempt)
            if isinstance(outcome, Sent):
                await outcome.response.aclose()

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        return await self.do(self.build_request(method, url, **kwargs))

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client and self.http_client is not None:
            await self.http_client.aclose()

    async def __aenter__(self) -> "AsyncClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
