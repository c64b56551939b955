"""
Base exception classes for clink.

Transport failures are not wrapped: they surface as the ``httpx`` exceptions
the transport raised. The classes here cover conditions clink detects itself.
"""


class ClinkError(Exception):
    """Base exception for all clink errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class MissingTransportError(ClinkError):
    """Raised for a send attempt on a client configured without a transport."""

    def __init__(self, message: str = "no HTTP client configured"):
        super().__init__(message)


class ResponseMissingError(ClinkError):
    """Raised when a response helper is given ``None``."""

    def __init__(self, message: str = "response is None"):
        super().__init__(message)


class ResponseBodyMissingError(ClinkError):
    """Raised when a response has no body to read."""

    def __init__(self, message: str = "response body is None"):
        super().__init__(message)


class DecodeError(ClinkError):
    """Raised when a response body is not valid JSON."""

    def __init__(self, reason: str):
        super().__init__(f"failed to decode response: {reason}")
        self.reason = reason
