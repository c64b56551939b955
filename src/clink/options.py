"""
Construction-time options for clink clients.

Each option is a callable that sets one field of the client under
construction. Options are applied in order, so later ones win.
"""

import base64
from typing import TYPE_CHECKING, Any, Callable, Mapping

from .ratelimit import RateLimiter
from .retry import RetryPredicate

if TYPE_CHECKING:
    from .clients.base import BaseClient

Option = Callable[["BaseClient"], None]


def with_client(http_client: Any) -> Option:
    """
    Use ``http_client`` as the transport.

    ``None`` is accepted: every attempt then fails with MissingTransportError.
    A client passed here is never closed by clink.
    """

    def apply(client: "BaseClient") -> None:
        client.http_client = http_client

    return apply


def with_headers(headers: Mapping[str, str]) -> Option:
    """Replace the whole header mapping."""

    def apply(client: "BaseClient") -> None:
        client.headers = dict(headers)

    return apply


def with_header(name: str, value: str) -> Option:
    """Set a single header, overwriting any previous value."""

    def apply(client: "BaseClient") -> None:
        client.headers[name] = value

    return apply


def with_rate_limit(per_minute: float) -> Option:
    """
    Admit at most ``per_minute`` requests per minute across all callers.

    Each client built with this option gets its own limiter; use
    ``with_rate_limiter`` to share one.

    Raises:
        ValueError: If ``per_minute`` is not positive
    """
    if per_minute <= 0:
        raise ValueError(f"per_minute must be positive, got {per_minute}")

    def apply(client: "BaseClient") -> None:
        client.rate_limiter = RateLimiter.per_minute(per_minute)

    return apply


def with_rate_limiter(limiter: RateLimiter | None) -> Option:
    """Use an existing limiter, e.g. one shared by several clients."""

    def apply(client: "BaseClient") -> None:
        client.rate_limiter = limiter

    return apply


def with_basic_auth(username: str, password: str) -> Option:
    credentials = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
    return with_header("Authorization", f"Basic {credentials}")


def with_bearer_auth(token: str) -> Option:
    return with_header("Authorization", f"Bearer {token}")


def with_user_agent(user_agent: str) -> Option:
    return with_header("User-Agent", user_agent)


def with_retries(max_retries: int, should_retry: RetryPredicate) -> Option:
    """
    Retry up to ``max_retries`` times while ``should_retry`` returns True.

    Args:
        max_retries: Retries after the first attempt (0 = single attempt)
        should_retry: Predicate called with the request and the attempt outcome

    Raises:
        ValueError: If ``max_retries`` is negative
    """
    if max_retries < 0:
        raise ValueError(f"max_retries must be non-negative, got {max_retries}")

    def apply(client: "BaseClient") -> None:
        client.max_retries = max_retries
        client.should_retry = should_retry

    return apply
