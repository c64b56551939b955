"""Shared fixtures and helpers."""

import httpx
import pytest


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def get_request():
    """A fresh GET request against the mock host."""
    return httpx.Request("GET", "http://test/items")
