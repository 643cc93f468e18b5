"""
OptionReader — dependencies and failure in one effect stack.

    from readerstack import option_reader as OR
    from readerstack import lift as L

    program = L.reader(turn_on_cache()).flat_map(lambda _: get_from_cache(key))
    result = program.run(store)  # Some(...) or Nothing()
"""

from __future__ import annotations

from readerstack.option_reader._types import OptionReader
from readerstack.option_reader._ops import pure, nothing

__all__ = (
    "OptionReader",
    "pure",
    "nothing",
)
