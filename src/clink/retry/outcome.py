"""
Attempt outcomes handed to retry predicates.

Each attempt either produced a response or failed with an error, never both.
"""

from dataclasses import dataclass
from typing import Callable

import httpx


@dataclass(frozen=True)
class Sent:
    """The transport returned a response (any status code)."""

    response: httpx.Response

    def unwrap(self) -> httpx.Response:
        return self.response


@dataclass(frozen=True)
class Failed:
    """The transport raised instead of returning a response."""

    error: Exception

    def unwrap(self) -> httpx.Response:
        raise self.error


Outcome = Sent | Failed

RetryPredicate = Callable[[httpx.Request, Outcome], bool]
