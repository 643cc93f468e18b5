"""
OptionReader types — environment + optional-result effect stack.
"""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Callable

from kungfu import Option, Some, Nothing

from readerstack._types import Projection
from readerstack.reader import Reader

# ═══════════════════════════════════════════════════════════════════════════════
# OptionReader — Reader of an Option
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class OptionReader[In, T]:
    """
    Reader whose result may be absent.

    Captures dependencies and failure in a single type, so one `flat_map`
    handles both: once a step yields `Nothing()`, the rest of the chain
    is skipped and absence is the final result.

    Example:
        from readerstack.datastore import option_dsl as OD

        greeting = OD.get("name").map(lambda name: f"Hello {name}")
        greeting.run(store)  # Some("Hello ...") or Nothing()
    """

    reader: Reader[In, Option[T]]

    def run(self, env: In) -> Option[T]:
        """Feed the environment in and get the optional result."""
        return self.reader.run(env)

    def __call__(self, env: In) -> Option[T]:
        return self.reader.run(env)

    def local[Outer](self, f: Projection[Outer, In]) -> OptionReader[Outer, T]:
        """Run inside a larger environment (see `Reader.local`)."""
        return OptionReader(self.reader.local(f))

    # ───────────────────────────────────────────────────────────────────────────
    # Functor
    # ───────────────────────────────────────────────────────────────────────────

    def map[U](self, f: Callable[[T], U]) -> OptionReader[In, U]:
        """Transform a present result; absence stays absent."""

        def map_option(opt: Option[T]) -> Option[U]:
            match opt:
                case Some(value):
                    return Some(f(value))
                case Nothing():
                    return Nothing()
                case other:
                    raise _not_an_option(other)

        return OptionReader(self.reader.map(map_option))

    # ───────────────────────────────────────────────────────────────────────────
    # Monad
    # ───────────────────────────────────────────────────────────────────────────

    def flat_map[U](
        self,
        f: Callable[[T], OptionReader[In, U]],
    ) -> OptionReader[In, U]:
        """
        Chain a step that needs this one's result.

        `f` is only called when the result is present; its reader then runs
        with the same environment.
        """
        run = self.reader.run

        def execute(env: In) -> Option[U]:
            match run(env):
                case Some(value):
                    return f(value).reader.run(env)
                case Nothing():
                    return Nothing()
                case other:
                    raise _not_an_option(other)

        return OptionReader(Reader(execute))

    then = flat_map


def _not_an_option(value: object) -> TypeError:
    return TypeError(
        f"OptionReader expected Some or Nothing, got {type(value).__name__}: {value!r}. "
        "Wrap plain values with lift.nullable()."
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("OptionReader",)
