"""
Datastore — key-value capability with Reader and OptionReader DSLs.

    from readerstack.datastore import dsl as D, option_dsl as OD

    D.get("name").run(store)   # "Brandon" or None
    OD.get("name").run(store)  # Some("Brandon") or Nothing()
"""

from __future__ import annotations

from readerstack.datastore._types import DataStore, MemoryDataStore
from readerstack.datastore import dsl
from readerstack.datastore import option_dsl

__all__ = (
    "DataStore",
    "MemoryDataStore",
    "dsl",
    "option_dsl",
)
