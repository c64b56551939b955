"""
clink - Retry Logic.

Attempt outcomes and the predicates that decide whether to try again.
"""

from .outcome import Sent, Failed, Outcome, RetryPredicate
from .predicates import (
    DEFAULT_RETRYABLE_STATUS_CODES,
    retry_on_status,
    retry_on_errors,
    retry_any,
)

__all__ = [
    "Sent",
    "Failed",
    "Outcome",
    "RetryPredicate",
    "DEFAULT_RETRYABLE_STATUS_CODES",
    "retry_on_status",
    "retry_on_errors",
    "retry_any",
]
