"""Tests for State."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from safe_monads import State, StatePair, state


class TestStateRun:
    """Tests for construction and run."""

    def test_run(self):
        pair = state(lambda s: (s, s + '_test')).run('starting state')
        assert pair == StatePair('starting state', 'starting state_test')

    def test_of_replaces_computation(self):
        pair = state(lambda s: (s, s + '_test')).of(lambda s: (s, 'other')).run('starting state')
        assert pair.state == 'starting state'
        assert pair.value == 'other'

    def test_rerun_is_independent(self):
        counter = state(lambda n: (n + 1, n))
        assert counter.run(1) == StatePair(2, 1)
        assert counter.run(10) == StatePair(11, 10)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            state(lambda s: (s, s)).fn = None  # type: ignore[misc]


class TestStateComposition:
    """Tests for map and flat_map."""

    def test_map(self):
        pair = (
            state(lambda s: (s, s + '_phase1_'))
            .map(lambda p: (p.state + '_ran_x1_3', 3))
            .run('start_str')
        )
        assert pair == StatePair('start_str_ran_x1_3', 3)

    def test_flat_map(self):
        pair = (
            state(lambda s: (s, 'v1'))
            .flat_map(lambda p: State(lambda s: (p.state + s, p.value)))
            .run('start')
        )
        assert pair == StatePair('startstart', 'v1')

    def test_flat_map_threads_updated_state(self):
        push = state(lambda stack: ((*stack, len(stack)), len(stack)))
        pair = push.flat_map(lambda _p: push).flat_map(lambda _p: push).run(())
        assert pair == StatePair((0, 1, 2), 2)

    @given(st.integers())
    def test_flat_map_left_identity(self, start: int):
        step = state(lambda n: (n * 2, n))
        unit = state(lambda n: (n, 'unit'))
        assert unit.flat_map(lambda _p: step).run(start) == step.run(start)
