"""
Mix and match — combine programs that use different parts of the effect stack.

Key concepts:
- take_first_name uses only failure        -> Option[str]
- turn_on_cache uses only dependencies     -> Reader[DataStore, None]
- get_from_cache uses both                 -> OptionReader[DataStore, str]
- lift.reader / lift.optional bring the first two into OptionReader

Run:
    python -m examples.mix_and_match
"""

from __future__ import annotations

from typing import Protocol

from kungfu import Option, Some, Nothing

from readerstack import lift as L
from readerstack.reader import Reader
from readerstack.option_reader import OptionReader
from readerstack.datastore import DataStore, MemoryDataStore
from readerstack.datastore import dsl as D, option_dsl as OD
from examples._infra import banner

type O[A] = OptionReader[DataStore, A]


# ═══════════════════════════════════════════════════════════════════════════════
# 1. PROTOCOL — three mini programs, three effect shapes
# ═══════════════════════════════════════════════════════════════════════════════


class MixAndMatch(Protocol):
    def take_first_name(self, data: str) -> Option[str]: ...

    def turn_on_cache(self) -> Reader[DataStore, None]: ...

    def get_from_cache(self, key: str) -> O[str]: ...


def mix_and_match(impl: MixAndMatch, key: str) -> O[str]:
    return (
        L.reader(impl.turn_on_cache())
        .flat_map(lambda _: L.optional(impl.take_first_name(key)))
        .flat_map(impl.get_from_cache)
    )


# ═══════════════════════════════════════════════════════════════════════════════
# 2. IMPLEMENTATION — over any DataStore
# ═══════════════════════════════════════════════════════════════════════════════


class CacheLookup:
    def take_first_name(self, data: str) -> Option[str]:
        first, _, _ = data.strip().partition(" ")
        return Some(first) if first else Nothing()

    def turn_on_cache(self) -> Reader[DataStore, None]:
        return D.set("cache", "on")

    def get_from_cache(self, key: str) -> O[str]:
        return OD.get(f"cache:{key}")


# ═══════════════════════════════════════════════════════════════════════════════
# Demo
# ═══════════════════════════════════════════════════════════════════════════════


def show(result: Option[str]) -> str:
    match result:
        case Some(value):
            return f"Some({value!r})"
        case _:
            return "Nothing"


if __name__ == "__main__":
    store = MemoryDataStore({"cache:Brandon": "brandon@example.com"})
    impl = CacheLookup()

    banner("Cached first name")
    print(f"  {show(mix_and_match(impl, 'Brandon Kase').run(store))}")

    banner("First name not cached")
    print(f"  {show(mix_and_match(impl, 'Ada Lovelace').run(store))}")

    banner("No first name: cache lookup skipped")
    print(f"  {show(mix_and_match(impl, '   ').run(store))}")
    print(f"  cache flag: {store.get('cache')}")
