"""Either type: Left[L] | Right[R], right-biased.

Exactly one channel is populated. `Left` and `Right` are built directly, and
`either()` keeps the two-argument form for callers that hold both candidates;
it rejects both-populated and neither-populated input eagerly.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeIs

import msgspec

from safe_monads._logging import get_logger
from safe_monads.errors import EitherBothError, EitherNeitherError

__all__ = ['Either', 'Left', 'Right', 'either']

_log = get_logger(__name__)


def _reject_empty(value: object) -> None:
    if value is None:
        _log.debug('either.neither_populated')
        raise EitherNeitherError


class Left[L](msgspec.Struct, frozen=True, gc=False):
    """Left channel of an Either.

    By convention Left carries the failure or alternative outcome; map and
    flat_map pass it through untouched.
    """

    value: L

    def __post_init__(self) -> None:
        _reject_empty(self.value)

    def is_left(self) -> TypeIs[Left[L]]:
        return True

    def is_right(self) -> TypeIs[Right[Any]]:
        return False

    def match[T](self, *, left: Callable[[L], T], right: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the result of the ``left`` handler."""
        return left(self.value)

    def tap(
        self,
        *,
        left: Callable[[L], object] | None = None,
        right: Callable[[Any], object] | None = None,  # noqa: ARG002
    ) -> None:
        """Run the ``left`` handler, if one was given."""
        if left is not None:
            left(self.value)

    def map(self, _fn: Callable[[Any], Any]) -> Left[L]:
        """Pass the left value through as a new Left."""
        return Left(self.value)

    def flat_map(self, _fn: Callable[[Any], Any]) -> Left[L]:
        """Pass the left value through as a new Left."""
        return Left(self.value)


class Right[R](msgspec.Struct, frozen=True, gc=False):
    """Right channel of an Either; the one map and flat_map act on.

    Examples:
        >>> either(right=2).map(lambda x: x + 1)
        Right(value=3)
    """

    value: R

    def __post_init__(self) -> None:
        _reject_empty(self.value)

    def is_left(self) -> TypeIs[Left[Any]]:
        return False

    def is_right(self) -> TypeIs[Right[R]]:
        return True

    def match[T](self, *, left: Callable[[Any], T], right: Callable[[R], T]) -> T:  # noqa: ARG002
        """Return the result of the ``right`` handler."""
        return right(self.value)

    def tap(
        self,
        *,
        left: Callable[[Any], object] | None = None,  # noqa: ARG002
        right: Callable[[R], object] | None = None,
    ) -> None:
        """Run the ``right`` handler, if one was given."""
        if right is not None:
            right(self.value)

    def map[T](self, fn: Callable[[R], T]) -> Right[T]:
        """Apply fn to the right value.

        Raises:
            EitherNeitherError: If fn returns None, since a Right cannot be
                empty.
        """
        return Right(fn(self.value))

    def flat_map[L, T](self, fn: Callable[[R], Either[L, T]]) -> Either[L, T]:
        """Return the Either produced by fn."""
        return fn(self.value)


type Either[L, R] = Left[L] | Right[R]


def either[L, R](left: L | None = None, right: R | None = None) -> Either[L, R]:
    """Build an Either from exactly one populated channel.

    Args:
        left: Left value, or None.
        right: Right value, or None.

    Raises:
        EitherBothError: If both values are given.
        EitherNeitherError: If neither value is given.

    Examples:
        >>> either('missing', None)
        Left(value='missing')
        >>> either(None, 0)
        Right(value=0)
    """
    if left is not None and right is not None:
        _log.debug('either.both_populated')
        raise EitherBothError
    if right is not None:
        return Right(right)
    if left is not None:
        return Left(left)
    _log.debug('either.neither_populated')
    raise EitherNeitherError
