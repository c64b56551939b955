"""
clink - Rate Limiting.

Token bucket admission gate shared by every request of a client.
"""

from .limiter import RateLimiter

__all__ = ["RateLimiter"]
