"""
Core types for readerstack.

Re-exports from kungfu + custom type aliases.
"""

from __future__ import annotations

from collections.abc import Callable

# Re-export from kungfu
from kungfu import Option, Some, Nothing

# ═══════════════════════════════════════════════════════════════════════════════
# Computation Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type Run[In, T] = Callable[[In], T]
"""Deferred computation: environment in, result out."""

type Projection[Outer, Inner] = Callable[[Outer], Inner]
"""Narrows a larger environment to the part a computation needs."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Option",
    "Some",
    "Nothing",
    # Type aliases
    "Run",
    "Projection",
)
