"""
OptionReader constructors.
"""

from __future__ import annotations

from kungfu import Some, Nothing

from readerstack import reader as R
from readerstack.option_reader._types import OptionReader

# ═══════════════════════════════════════════════════════════════════════════════
# pure() — Always Present
# ═══════════════════════════════════════════════════════════════════════════════


def pure[In, T](value: T) -> OptionReader[In, T]:
    """
    Wrap a value in Some, then in a constant Reader.

    Example:
        from readerstack import option_reader as OR

        OR.pure("Brandon").run(store)  # Some("Brandon")
    """
    return OptionReader(R.pure(Some(value)))


# ═══════════════════════════════════════════════════════════════════════════════
# nothing() — Always Absent
# ═══════════════════════════════════════════════════════════════════════════════


def nothing[In, T]() -> OptionReader[In, T]:
    """Computation that yields Nothing() for every environment."""
    return OptionReader(R.pure(Nothing()))


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("pure", "nothing")
