"""
Reader constructors.
"""

from __future__ import annotations

from readerstack.reader._types import Reader

# ═══════════════════════════════════════════════════════════════════════════════
# ask() — The Environment Itself
# ═══════════════════════════════════════════════════════════════════════════════


def ask[In]() -> Reader[In, In]:
    """
    Request the environment inside a chain.

    Example:
        from readerstack import reader as R

        store = R.ask().map(lambda cfg: cfg.data_store)
    """
    return Reader(_identity)


def _identity[In](env: In) -> In:
    return env


# ═══════════════════════════════════════════════════════════════════════════════
# pure() — Constant Reader
# ═══════════════════════════════════════════════════════════════════════════════


def pure[In, T](value: T) -> Reader[In, T]:
    """
    Lift a value into Reader, ignoring the environment.

    Example:
        R.pure(42).run(anything)  # 42
    """
    return Reader(lambda _: value)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("ask", "pure")
