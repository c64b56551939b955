"""
clink - Clients.

Sync and async request executors sharing one configuration model.
"""

from .base import BaseClient
from .sync import Client
from .async_client import AsyncClient

__all__ = [
    "BaseClient",
    "Client",
    "AsyncClient",
]
