"""
Synchronous clink client backed by ``httpx.Client``.
"""

import logging
from typing import Any

import httpx

from .base import BaseClient
from ..retry import Outcome, Sent, Failed

logger = logging.getLogger(__name__)


class Client(BaseClient):
    """
    HTTP client applying headers, rate limiting and retries around ``httpx.Client``.

    Features:
    - Configured headers merged into every attempt
    - Shared token bucket admission before each attempt
    - Caller-supplied retry predicate with a bounded retry budget

    Safe to share between threads once constructed.
    """

    http_client: httpx.Client | None

    def _default_http_client(self) -> httpx.Client:
        return httpx.Client()

    def _send(self, request: httpx.Request) -> Outcome:
        if self.http_client is None:
            return self._missing_transport()
        logger.debug(f"Sending {request.method} {request.url}")
        try:
            return Sent(self.http_client.send(request))
        except httpx.HTTPError as e:
            return Failed(e)

    def do(self, request: httpx.Request) -> httpx.Response:
        """
        Send ``request``, retrying while the retry predicate asks for it.

        Non-2xx responses are returned like any other response. Responses of
        retried attempts are closed before the next attempt.

        Args:
            request: Prepared request; its headers are updated in place

        Returns:
            Response of the last attempt

        Raises:
            httpx.HTTPError: Transport error of the last attempt, unchanged
            MissingTransportError: If the client has no transport
        """
        attempt = 0
        while True:
            self._apply_headers(request)
            if self.rate_limiter is not None:
                self.rate_limiter.wait()

            outcome = self._send(request)
            try:
                retry = self._wants_retry(request, outcome, attempt)
            except Exception:
                if isinstance(outcome, Sent):
                    outcome.response.close()
                raise
            if not retry:
                return outcome.unwrap()

            attempt += 1
            self._log_retry(request, outcome, attempt)
            if isinstance(outcome, Sent):
                outcome.response.close()

    def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Build a request and send it with ``do``."""
        return self.do(self.build_request(method, url, **kwargs))

    def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return self.request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return self.request("POST", url, **kwargs)

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client and self.http_client is not None:
            self.http_client.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
