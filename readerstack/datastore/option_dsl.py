"""
Datastore DSL over OptionReader — a missing key is absence.

    from readerstack.datastore import option_dsl as OD

    program = OD.get("first").flat_map(lambda first: OD.get(first))
    program.run(store)  # Nothing() as soon as any key is missing
"""

from __future__ import annotations

from kungfu import Option, Some, Nothing

from readerstack.reader import Reader
from readerstack.option_reader import OptionReader
from readerstack.datastore._types import DataStore


def get(key: str) -> OptionReader[DataStore, str]:
    """Given a store, produce Some(value) or Nothing() if `key` is missing."""

    def lookup(store: DataStore) -> Option[str]:
        value = store.get(key)
        return Nothing() if value is None else Some(value)

    return OptionReader(Reader(lookup))


def set(key: str, value: str) -> OptionReader[DataStore, None]:
    """Given a store, write `value` under `key`. Always present."""

    def write(store: DataStore) -> Option[None]:
        store.set(key, value)
        return Some(None)

    return OptionReader(Reader(write))


__all__ = ("get", "set")
