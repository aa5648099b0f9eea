"""State: a computation that threads a state value alongside its result."""

from __future__ import annotations

from collections.abc import Callable

import msgspec

__all__ = ['State', 'StatePair', 'state']


class StatePair[S, A](msgspec.Struct, frozen=True):
    """Outcome of running a State: the final state and the produced value."""

    state: S
    value: A


class State[S, A](msgspec.Struct, frozen=True):
    """Wraps a function ``S -> (S, A)`` to be run later from a starting state.

    Examples:
        >>> counter = state(lambda n: (n + 1, f'was {n}'))
        >>> counter.run(1)
        StatePair(state=2, value='was 1')
        >>> counter.flat_map(lambda pair: counter).run(1)
        StatePair(state=3, value='was 2')
    """

    fn: Callable[[S], tuple[S, A]]

    def of[B](self, fn: Callable[[S], tuple[S, B]]) -> State[S, B]:
        """Build a new State from fn, discarding this one."""
        return State(fn)

    def run(self, initial: S) -> StatePair[S, A]:
        """Run the computation from ``initial``."""
        next_state, value = self.fn(initial)
        return StatePair(next_state, value)

    def map[B](self, fn: Callable[[StatePair[S, A]], tuple[S, B]]) -> State[S, B]:
        """Derive a new ``(state, value)`` tuple from the pair this State produces."""
        return State(lambda initial: fn(self.run(initial)))

    def flat_map[B](self, fn: Callable[[StatePair[S, A]], State[S, B]]) -> State[S, B]:
        """Chain a State-returning function.

        The State returned by fn runs from the state this one finished with.
        """

        def run(initial: S) -> tuple[S, B]:
            pair = self.run(initial)
            following = fn(pair).run(pair.state)
            return following.state, following.value

        return State(run)


def state[S, A](fn: Callable[[S], tuple[S, A]]) -> State[S, A]:
    """Wrap ``fn`` in a State."""
    return State(fn)
