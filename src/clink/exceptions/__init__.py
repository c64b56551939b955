"""
clink - Exception Hierarchy.

Named errors so callers can branch on the cause of a failure.
"""

from .base import (
    ClinkError,
    MissingTransportError,
    ResponseMissingError,
    ResponseBodyMissingError,
    DecodeError,
)

__all__ = [
    "ClinkError",
    "MissingTransportError",
    "ResponseMissingError",
    "ResponseBodyMissingError",
    "DecodeError",
]
