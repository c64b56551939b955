"""
Base client.

Holds the configuration shared by the sync and async clients and the pieces
of the request loop that do not depend on how I/O is performed.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

import httpx

from ..exceptions import MissingTransportError
from ..ratelimit import RateLimiter
from ..retry import Failed, Outcome, RetryPredicate, Sent

if TYPE_CHECKING:
    from ..options import Option

logger = logging.getLogger(__name__)

_UNSET: Any = object()


class BaseClient(ABC):
    """
    Abstract base class for clink clients.

    Configuration is fixed once the constructor returns. Mutating fields while
    requests are in flight is not supported; only the rate limiter changes
    state afterwards, and it synchronizes itself.
    """

    def __init__(self, *options: "Option"):
        """
        Initialize the client.

        Args:
            options: Options from ``clink.options``, applied in order
        """
        self.http_client: Any = _UNSET
        self.headers: dict[str, str] = {}
        self.rate_limiter: RateLimiter | None = None
        self.max_retries: int = 0
        self.should_retry: RetryPredicate | None = None

        for option in options:
            option(self)

        self._owns_http_client = self.http_client is _UNSET
        if self._owns_http_client:
            self.http_client = self._default_http_client()

    @abstractmethod
    def _default_http_client(self) -> Any:
        """Create the transport used when no ``with_client`` option was given."""
        ...

    def _apply_headers(self, request: httpx.Request) -> None:
        for name, value in self.headers.items():
            request.headers[name] = value

    def _wants_retry(self, request: httpx.Request, outcome: Outcome, attempt: int) -> bool:
        """Budget is checked before the predicate, so it is never asked once exhausted."""
        if self.should_retry is None or attempt >= self.max_retries:
            return False
        return bool(self.should_retry(request, outcome))

    def _log_retry(self, request: httpx.Request, outcome: Outcome, attempt: int) -> None:
        if isinstance(outcome, Sent):
            reason = f"status {outcome.response.status_code}"
        else:
            reason = f"{type(outcome.error).__name__}: {outcome.error}"
        logger.warning(
            f"Retry {attempt}/{self.max_retries} for {request.method} {request.url}: {reason}"
        )

    def build_request(self, method: str, url: str, **kwargs: Any) -> httpx.Request:
        """
        Build a request, through the transport when one is configured.

        Args:
            method: HTTP method
            url: Absolute URL, or relative to the transport's base_url
            kwargs: Passed to ``build_request`` (params, headers, json, content, ...)

        Returns:
            The request, not yet sent
        """
        if self.http_client is None:
            return httpx.Request(method, url, **kwargs)
        return self.http_client.build_request(method, url, **kwargs)

    def _missing_transport(self) -> Failed:
        return Failed(MissingTransportError())
