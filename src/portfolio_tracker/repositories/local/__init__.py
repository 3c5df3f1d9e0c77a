"""Client-side storage implementations."""

from portfolio_tracker.repositories.local.json_storage import JsonFileStorage
from portfolio_tracker.repositories.local.memory_storage import InMemoryStorage

__all__ = [
    "JsonFileStorage",
    "InMemoryStorage",
]
