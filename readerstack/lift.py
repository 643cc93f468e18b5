"""
Lift — bring single-effect computations into OptionReader.

    from readerstack import lift as L

    L.reader(turn_on_cache()).flat_map(
        lambda _: L.optional(take_first_name(key))
    ).flat_map(get_from_cache)

Operations that only read the environment and values that are only
optional can then compose with ones that use both.
"""

from __future__ import annotations

from kungfu import Option, Some, Nothing

from readerstack import reader as R
from readerstack.reader import Reader
from readerstack.option_reader import OptionReader, pure


# ═══════════════════════════════════════════════════════════════════════════════
# reader() — Environment Effect Only
# ═══════════════════════════════════════════════════════════════════════════════


def reader[In, T](r: Reader[In, T]) -> OptionReader[In, T]:
    """
    Lift a Reader that never fails: its result is always present.

    Example:
        L.reader(D.get("name")).run(store)  # Some(...)
    """
    return OptionReader(r.map(Some))


# ═══════════════════════════════════════════════════════════════════════════════
# optional() — Optional Effect Only
# ═══════════════════════════════════════════════════════════════════════════════


def optional[In, T](o: Option[T]) -> OptionReader[In, T]:
    """
    Lift an Option that doesn't depend on the environment.

    The Option is returned as-is for every environment.

    Example:
        L.optional(Nothing()).run(store)  # Nothing()
    """
    return OptionReader(R.pure(o))


def nullable[In, T](value: T | None) -> OptionReader[In, T]:
    """
    Lift a plain Python value where None means absent.

    Example:
        L.nullable(os.environ.get("USER"))
    """
    return optional(Nothing() if value is None else Some(value))


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "reader",
    "optional",
    "nullable",
    # From option_reader
    "pure",
)
