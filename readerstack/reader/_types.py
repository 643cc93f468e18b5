"""
Reader types — environment-passing computation.
"""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Callable

from readerstack._types import Run, Projection

# ═══════════════════════════════════════════════════════════════════════════════
# Reader — Deferred Function of the Environment
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Reader[In, T]:
    """
    A computation that reads its input from an environment.

    Nothing happens until `run` is called with the environment.
    Every combinator returns a new Reader; the original stays usable.

    Example:
        from readerstack import reader as R

        greeting = R.ask().map(lambda cfg: f"Hello {cfg.name}")
        greeting.run(Config(name="Brandon"))  # "Hello Brandon"
    """

    run: Run[In, T]

    def __call__(self, env: In) -> T:
        return self.run(env)

    def local[Outer](self, f: Projection[Outer, In]) -> Reader[Outer, T]:
        """
        Run this reader inside a larger environment.

        `f` projects the larger environment onto the one this reader needs,
        so a DSL written against a single capability can be used from a
        program whose environment aggregates many of them.

        Example:
            get_name.local(lambda cfg: cfg.data_store)
        """
        run = self.run
        return Reader(lambda env: run(f(env)))

    # ───────────────────────────────────────────────────────────────────────────
    # Functor
    # ───────────────────────────────────────────────────────────────────────────

    def map[U](self, f: Callable[[T], U]) -> Reader[In, U]:
        """Transform the result after the environment has been fed in."""
        run = self.run
        return Reader(lambda env: f(run(env)))

    # ───────────────────────────────────────────────────────────────────────────
    # Monad
    # ───────────────────────────────────────────────────────────────────────────

    def flat_map[U](self, f: Callable[[T], Reader[In, U]]) -> Reader[In, U]:
        """
        Chain a reader that depends on this one's result.

        The inner reader is run straight away with the same environment.

        Example:
            D.set("name", "Brandon").flat_map(lambda _: D.get("name"))
        """
        run = self.run
        return Reader(lambda env: f(run(env)).run(env))

    then = flat_map


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("Reader",)
