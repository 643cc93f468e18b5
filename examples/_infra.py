"""Shared infrastructure for examples."""

from __future__ import annotations

from dataclasses import dataclass, field

from readerstack.datastore import DataStore, MemoryDataStore


# Environment
@dataclass(frozen=True, slots=True)
class Config:
    """Every dependency the example programs need."""
    data_store: DataStore = field(default_factory=MemoryDataStore)
    greeting: str = "Hello"


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")
