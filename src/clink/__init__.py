"""
clink - Configurable HTTP request executor.

Wraps an httpx client with default headers, authentication, rate limiting
and predicate-driven retries.
"""

from .clients import BaseClient, Client, AsyncClient
from .decode import decode_json, adecode_json
from .exceptions import (
    ClinkError,
    MissingTransportError,
    ResponseMissingError,
    ResponseBodyMissingError,
    DecodeError,
)
from .options import (
    Option,
    with_client,
    with_headers,
    with_header,
    with_rate_limit,
    with_rate_limiter,
    with_basic_auth,
    with_bearer_auth,
    with_user_agent,
    with_retries,
)
from .ratelimit import RateLimiter
from .retry import (
    Sent,
    Failed,
    Outcome,
    RetryPredicate,
    retry_on_status,
    retry_on_errors,
    retry_any,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Clients
    "BaseClient",
    "Client",
    "AsyncClient",
    # Options
    "Option",
    "with_client",
    "with_headers",
    "with_header",
    "with_rate_limit",
    "with_rate_limiter",
    "with_basic_auth",
    "with_bearer_auth",
    "with_user_agent",
    "with_retries",
    # Rate limiting
    "RateLimiter",
    # Retry
    "Sent",
    "Failed",
    "Outcome",
    "RetryPredicate",
    "retry_on_status",
    "retry_on_errors",
    "retry_any",
    # Decoding
    "decode_json",
    "adecode_json",
    # Exceptions
    "ClinkError",
    "MissingTransportError",
    "ResponseMissingError",
    "ResponseBodyMissingError",
    "DecodeError",
]
