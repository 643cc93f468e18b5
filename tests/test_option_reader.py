"""
Tests for OptionReader — environment + absence effect stack.

These tests verify that:
1. pure/nothing build present/absent computations
2. map satisfies the functor laws and leaves absence alone
3. flat_map satisfies the monad laws
4. Absence short-circuits: later steps are never invoked
"""

from __future__ import annotations

import pytest
from kungfu import Option, Some, Nothing

from readerstack import option_reader as OR
from readerstack.reader import Reader
from readerstack.option_reader import OptionReader
from tests._helpers import ABSENT, value_of


ENVIRONMENTS = [0, 1, 5, 42]


def positive(env: int) -> Option[int]:
    return Some(env) if env > 0 else Nothing()


def half(x: int) -> OptionReader[int, int]:
    """Present only for even numbers; adds the environment."""
    return OptionReader(Reader(lambda env: Some(x // 2 + env) if x % 2 == 0 else Nothing()))


def below(limit: int):
    def check(x: int) -> OptionReader[int, int]:
        return OptionReader(Reader(lambda env: Some(x) if x < limit + env else Nothing()))
    return check


def assert_equivalent(left: OptionReader, right: OptionReader) -> None:
    for env in ENVIRONMENTS:
        assert value_of(left.run(env)) == value_of(right.run(env))


# =============================================================================
# CONSTRUCTORS
# =============================================================================

class TestConstructors:
    """pure() is always present, nothing() always absent."""

    @pytest.mark.parametrize("env", ENVIRONMENTS)
    def test_pure_is_present_for_every_environment(self, env):
        assert value_of(OR.pure("value").run(env)) == "value"

    @pytest.mark.parametrize("env", ENVIRONMENTS)
    def test_nothing_is_absent_for_every_environment(self, env):
        assert value_of(OR.nothing().run(env)) is ABSENT

    def test_pure_of_none_is_present(self):
        assert isinstance(OR.pure(None).run(0), Some)

    def test_run_and_call_delegate_to_reader(self):
        program = OptionReader(Reader(positive))
        assert value_of(program(3)) == value_of(program.run(3)) == 3
        assert value_of(program.reader.run(3)) == 3


# =============================================================================
# FUNCTOR
# =============================================================================

class TestFunctor:
    """map applies only to present values."""

    def test_identity(self):
        program = OptionReader(Reader(positive))
        assert_equivalent(program.map(lambda x: x), program)

    def test_composition(self):
        program = OptionReader(Reader(positive))
        assert_equivalent(
            program.map(lambda x: x * 2).map(str),
            program.map(lambda x: str(x * 2)),
        )

    def test_maps_present_value(self):
        assert value_of(OR.pure(20).map(lambda x: x + 1).run(0)) == 21

    def test_absence_maps_to_absence_without_calling_f(self):
        calls = []
        program = OR.nothing().map(calls.append)

        assert value_of(program.run(0)) is ABSENT
        assert calls == []


# =============================================================================
# MONAD LAWS
# =============================================================================

class TestMonadLaws:
    """flat_map composes both effects at once."""

    @pytest.mark.parametrize("value", [0, 3, 8])
    def test_left_identity(self, value):
        assert_equivalent(OR.pure(value).flat_map(half), half(value))

    def test_right_identity(self):
        program = OptionReader(Reader(positive))
        assert_equivalent(program.flat_map(OR.pure), program)

    def test_associativity(self):
        program = OptionReader(Reader(positive))
        check = below(10)
        assert_equivalent(
            program.flat_map(half).flat_map(check),
            program.flat_map(lambda x: half(x).flat_map(check)),
        )

    def test_inner_runs_with_same_environment(self):
        program = OR.pure(4).flat_map(half)
        assert value_of(program.run(100)) == 102

    def test_then_is_flat_map(self):
        program = OptionReader(Reader(positive))
        assert_equivalent(program.then(half), program.flat_map(half))


# =============================================================================
# SHORT-CIRCUIT
# =============================================================================

class TestShortCircuit:
    """Once absent, the rest of the chain is skipped."""

    def test_absent_source_never_calls_f(self):
        calls = []

        def step(x):
            calls.append(x)
            return OR.pure(x)

        program = OptionReader(Reader(positive)).flat_map(step)

        assert value_of(program.run(0)) is ABSENT
        assert calls == []

        assert value_of(program.run(7)) == 7
        assert calls == [7]

    def test_absent_in_middle_skips_remaining_steps(self):
        calls = []

        def later(x):
            calls.append(x)
            return OR.pure(x)

        program = OR.pure(3).flat_map(half).flat_map(later).map(calls.append)

        assert value_of(program.run(0)) is ABSENT
        assert calls == []

    def test_inner_reader_not_run_when_absent(self):
        runs = []

        def inner(x):
            return OptionReader(Reader(lambda env: runs.append(env) or Some(x)))

        OR.nothing().flat_map(inner).run("env")

        assert runs == []


# =============================================================================
# LOCAL
# =============================================================================

class TestLocal:
    """local() re-scopes the wrapped reader."""

    def test_local_projects_environment(self):
        program = OptionReader(Reader(positive)).local(lambda cfg: cfg["count"])

        assert value_of(program.run({"count": 3})) == 3
        assert value_of(program.run({"count": 0})) is ABSENT

    def test_local_then_flat_map(self):
        program = (
            OptionReader(Reader(positive))
            .local(len)
            .flat_map(lambda n: OR.pure(n * 10))
        )

        assert value_of(program.run("abc")) == 30
        assert value_of(program.run("")) is ABSENT


# =============================================================================
# MISUSE
# =============================================================================

class TestNonOptionPayload:
    """A wrapped reader must yield Some or Nothing; anything else is an error."""

    def test_map_rejects_raw_none(self):
        program = OptionReader(Reader(lambda env: None)).map(str)

        with pytest.raises(TypeError, match="lift.nullable"):
            program.run(0)

    def test_flat_map_rejects_raw_value(self):
        calls = []

        def step(x):
            calls.append(x)
            return OR.pure(x)

        program = OptionReader(Reader(lambda env: env)).flat_map(step)

        with pytest.raises(TypeError, match="got int"):
            program.run(5)
        assert calls == []

    def test_nothing_instance_is_still_absence(self):
        program = OptionReader(Reader(lambda env: Nothing())).map(str)
        assert value_of(program.run(0)) is ABSENT
