"""
Ready-made retry predicates.

Any callable ``(request, outcome) -> bool`` works as a predicate; these cover
the common cases and can be combined with ``retry_any``.
"""

import httpx

from .outcome import Failed, Outcome, RetryPredicate, Sent

DEFAULT_RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


def retry_on_status(*status_codes: int) -> RetryPredicate:
    """
    Retry responses whose status code is in ``status_codes``.

    Args:
        status_codes: Codes that trigger a retry (default: 429 and 5xx gateway codes)

    Returns:
        Predicate that ignores failed attempts
    """
    codes = frozenset(status_codes) or DEFAULT_RETRYABLE_STATUS_CODES

    def predicate(request: httpx.Request, outcome: Outcome) -> bool:
        return isinstance(outcome, Sent) and outcome.response.status_code in codes

    return predicate


def retry_on_errors(*error_types: type[Exception]) -> RetryPredicate:
    """
    Retry attempts that failed with one of ``error_types``.

    Args:
        error_types: Exception classes to retry (default: httpx.TransportError)

    Returns:
        Predicate that ignores attempts which produced a response
    """
    types = error_types or (httpx.TransportError,)

    def predicate(request: httpx.Request, outcome: Outcome) -> bool:
        return isinstance(outcome, Failed) and isinstance(outcome.error, types)

    return predicate


def retry_any(*predicates: RetryPredicate) -> RetryPredicate:
    """Retry when at least one of ``predicates`` asks for it."""

    def predicate(request: httpx.Request, outcome: Outcome) -> bool:
        return any(p(request, outcome) for p in predicates)

    return predicate
