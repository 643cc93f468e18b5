"""
Datastore DSL over Reader.

    from readerstack.datastore import dsl as D

    program = D.set("name", "Brandon").flat_map(lambda _: D.get("name"))
    program.run(store)  # "Brandon"

Each command captures the store per call, not in any object state.
"""

from __future__ import annotations

from readerstack.reader import Reader
from readerstack.datastore._types import DataStore


def get(key: str) -> Reader[DataStore, str | None]:
    """Given a store, produce the value under `key` (None if missing)."""
    return Reader(lambda store: store.get(key))


def set(key: str, value: str) -> Reader[DataStore, None]:
    """Given a store, write `value` under `key`. Produces None."""
    return Reader(lambda store: store.set(key, value))


__all__ = ("get", "set")
