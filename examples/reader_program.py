"""
Reader program — a DSL over one capability, run inside the full Config.

Key concepts:
- DSL commands return Reader[DataStore, ...]: the store is captured per call
- The program composes them with flat_map/map; nothing runs yet
- .local() lifts the program from DataStore to the whole Config

Run:
    python -m examples.reader_program
"""

from __future__ import annotations

from readerstack import reader as R
from readerstack.reader import Reader
from readerstack.datastore import dsl as D
from readerstack.datastore import MemoryDataStore
from examples._infra import banner, Config


# ═══════════════════════════════════════════════════════════════════════════════
# 1. PROGRAM — composed Readers, no state
# ═══════════════════════════════════════════════════════════════════════════════


def main() -> Reader[Config, str]:
    return (
        D.set("name", "Brandon")
        .flat_map(lambda _: D.get("name"))
        .map(lambda name: f"Hello {name}")
        .local(lambda config: config.data_store)
    )


# ═══════════════════════════════════════════════════════════════════════════════
# 2. ASK — read other parts of Config in the same chain
# ═══════════════════════════════════════════════════════════════════════════════


def greet(key: str) -> Reader[Config, str]:
    name = D.get(key).local(lambda config: config.data_store)
    return R.ask().flat_map(
        lambda config: name.map(lambda n: f"{config.greeting} {n or 'stranger'}")
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Demo
# ═══════════════════════════════════════════════════════════════════════════════


if __name__ == "__main__":
    banner("Reader program")
    program = main()
    print(f"  {program.run(Config(data_store=MemoryDataStore()))}")

    banner("Same program, different environments")
    store = MemoryDataStore({"name": "Ada"})
    print(f"  {greet('name').run(Config(data_store=store))}")
    print(f"  {greet('name').run(Config(data_store=store, greeting='Howdy'))}")
    print(f"  {greet('missing').run(Config(data_store=store))}")
