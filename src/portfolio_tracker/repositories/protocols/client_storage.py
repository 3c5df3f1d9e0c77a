"""Durable client-side key/value storage protocol."""

from typing import Protocol, Optional


class ClientStorage(Protocol):
    """
    String key/value store that survives process restarts.

    Values are strings; callers serialize structured data themselves.
    """

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove a key; removing an absent key is a no-op."""
        ...
