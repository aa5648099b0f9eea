"""Reader: a deferred computation from an environment to a value.

A Reader holds no value until `run()` is called. Every run re-invokes the
wrapped function; composed Readers forward the very same environment object
to each step, so environment-providing side effects happen once per run.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

import msgspec

__all__ = ['Reader', 'reader']


class Reader[E, A](msgspec.Struct, frozen=True):
    """Wraps a function ``E -> A`` to be run later against an environment.

    Examples:
        >>> port = reader(lambda cfg: cfg['port'])
        >>> port.map(str).run({'port': 8080})
        '8080'
        >>> port.flat_map(lambda p: reader(lambda cfg: f"{cfg['host']}:{p}")).run(
        ...     {'host': 'localhost', 'port': 8080}
        ... )
        'localhost:8080'
    """

    fn: Callable[[E], A]

    # --- Constructors ---

    @classmethod
    def of[B](cls, value: B) -> Reader[Any, B]:
        """Reader that ignores the environment and returns ``value``."""
        return cls(lambda _env: value)

    @classmethod
    def ask(cls) -> Reader[Any, Any]:
        """Reader that returns the environment itself."""
        return cls(lambda env: env)

    @classmethod
    def asks[C, B](cls, accessor: Callable[[C], B]) -> Reader[C, B]:
        """Reader that projects a part of the environment."""
        return cls(accessor)

    @classmethod
    def sequence[C, B](cls, readers: Iterable[Reader[C, B]]) -> Reader[C, list[B]]:
        """Run every reader against the same environment, collecting results."""
        readers = tuple(readers)
        return cls(lambda env: [r.run(env) for r in readers])

    @classmethod
    def traverse[C, B, Acc](
        cls,
        readers: Iterable[Reader[C, B]],
        reducer: Callable[[Acc, B, int], Acc],
        initial: Acc,
    ) -> Reader[C, Acc]:
        """Fold the results of several readers into one value.

        Args:
            readers: Readers to run, in order.
            reducer: Called as ``reducer(acc, value, index)``.
            initial: Starting accumulator.
        """
        readers = tuple(readers)

        def run(env: C) -> Acc:
            acc = initial
            for index, r in enumerate(readers):
                acc = reducer(acc, r.run(env), index)
            return acc

        return cls(run)

    @classmethod
    def combine[C, B](cls, readers: Sequence[Reader[C, Any]], fn: Callable[..., B]) -> Reader[C, B]:
        """Run several readers and pass their results positionally to fn."""
        readers = tuple(readers)
        return cls(lambda env: fn(*(r.run(env) for r in readers)))

    # --- Running ---

    def run(self, env: E) -> A:
        """Run the computation against ``env``."""
        return self.fn(env)

    # --- Composition ---

    def map[B](self, fn: Callable[[A], B]) -> Reader[E, B]:
        return Reader(lambda env: fn(self.run(env)))

    def map_to[B](self, value: B) -> Reader[E, B]:
        return self.map(lambda _value: value)

    def flat_map[B](self, fn: Callable[[A], Reader[E, B]]) -> Reader[E, B]:
        """Chain a Reader-returning function.

        The environment given to `run()` is passed unchanged to both this
        reader and the one produced by fn.
        """
        return Reader(lambda env: fn(self.run(env)).run(env))

    def local[C](self, fn: Callable[[C], E]) -> Reader[C, A]:
        """Run this reader against an environment derived by fn."""
        return Reader(lambda env: self.run(fn(env)))

    def zip_with[B, R](self, other: Reader[E, B], fn: Callable[[A, B], R]) -> Reader[E, R]:
        return Reader(lambda env: fn(self.run(env), other.run(env)))

    def tap(self, fn: Callable[[A], object]) -> Reader[E, A]:
        """Run a side effect on the result, passing the result through."""

        def run(env: E) -> A:
            value = self.run(env)
            fn(value)
            return value

        return Reader(run)

    def and_then[B](self, other: Reader[E, B]) -> Reader[E, B]:
        """Run self for its effects, then return other's result."""

        def run(env: E) -> B:
            self.run(env)
            return other.run(env)

        return Reader(run)

    def and_finally(self, other: Reader[E, Any]) -> Reader[E, A]:
        """Return self's result after running other for its effects."""

        def run(env: E) -> A:
            value = self.run(env)
            other.run(env)
            return value

        return Reader(run)

    def with_env[B](self, fn: Callable[[E, A], B]) -> Reader[E, B]:
        """Map with access to both the environment and the value."""
        return Reader(lambda env: fn(env, self.run(env)))

    def filter(self, predicate: Callable[[A], bool], default: A) -> Reader[E, A]:
        """Replace the result with ``default`` when predicate rejects it."""

        def run(env: E) -> A:
            value = self.run(env)
            return value if predicate(value) else default

        return Reader(run)

    def fanout(self, *fns: Callable[[A], Any]) -> Reader[E, tuple[Any, ...]]:
        """Apply several functions to the same result."""

        def run(env: E) -> tuple[Any, ...]:
            value = self.run(env)
            return tuple(fn(value) for fn in fns)

        return Reader(run)


def reader[E, A](fn: Callable[[E], A]) -> Reader[E, A]:
    """Wrap ``fn`` in a Reader."""
    return Reader(fn)
