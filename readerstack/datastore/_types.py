"""
Datastore types.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

# ═══════════════════════════════════════════════════════════════════════════════
# DataStore Protocol — Users Implement This
# ═══════════════════════════════════════════════════════════════════════════════


class DataStore(Protocol):
    """
    Key-value capability that DSL commands read from the environment.

    DSL functions depend on this protocol, never on an implementation.

    Example:
        class RedisStore:
            def __init__(self, client: Redis) -> None:
                self.client = client

            def get(self, key: str) -> str | None:
                data = self.client.get(key)
                return data.decode() if data else None

            def set(self, key: str, value: str) -> None:
                self.client.set(key, value)
    """

    def get(self, key: str) -> str | None:
        """Get value. Returns None if the key is missing."""
        ...

    def set(self, key: str, value: str) -> None:
        """Set value."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Memory DataStore — In-Process Dict
# ═══════════════════════════════════════════════════════════════════════════════


class MemoryDataStore:
    """
    Dict-backed DataStore.

    Example:
        store = MemoryDataStore({"name": "Brandon"})
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "DataStore",
    "MemoryDataStore",
)
