"""Writer: a value paired with the log entries collected while computing it.

Entries are plain values kept in a tuple. This is unrelated to the package's
structlog output in `safe_monads._logging`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import msgspec

__all__ = ['Writer', 'writer']


class Writer[W, A](msgspec.Struct, frozen=True):
    """Immutable ``(logs, value)`` pair whose logs accumulate under flat_map.

    Examples:
        >>> result = Writer.start_with('start at 100', 100).flat_map(
        ...     lambda n: writer([f'add 3 to {n}'], n + 3)
        ... )
        >>> result.logs
        ('start at 100', 'add 3 to 100')
        >>> result.value
        103
    """

    logs: tuple[W, ...]
    value: A

    @classmethod
    def tell(cls, entry: W) -> Writer[W, int]:
        """Start a Writer with one entry and the value ``0``."""
        return cls((entry,), 0)

    @classmethod
    def start_with(cls, entry: W, value: A) -> Writer[W, A]:
        """Start a Writer with one entry and ``value``."""
        return cls((entry,), value)

    def of[B](self, value: B) -> Writer[W, B]:
        """Wrap ``value`` with no log entries."""
        return Writer((), value)

    def flat_map[B](self, fn: Callable[[A], Writer[W, B]]) -> Writer[W, B]:
        """Apply fn to the value, appending its entries to these."""
        following = fn(self.value)
        return Writer(self.logs + following.logs, following.value)

    def flat_map_pair[B](self, fn: Callable[[A], tuple[W, B]]) -> Writer[W, B]:
        """Apply fn returning ``(entry, value)``, appending the single entry."""
        entry, value = fn(self.value)
        return Writer((*self.logs, entry), value)

    def run_using[R](self, fn: Callable[[Writer[W, A]], R]) -> R:
        """Hand this Writer to fn, which reads ``.logs`` and ``.value``."""
        return fn(self)


def writer[W, A](logs: Iterable[W], value: A) -> Writer[W, A]:
    """Build a Writer from any iterable of entries."""
    return Writer(tuple(logs), value)
