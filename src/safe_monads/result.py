"""Result type: Ok[T] | Fail[E] for explicit error handling.

Results are built directly into one variant with `ok()` or `fail()`. The
operations named ``unwrap*`` are boundary assertions and raise when called on
the wrong variant; everything else treats failure as an ordinary value.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import Any, NoReturn, TypeIs

import msgspec

from safe_monads._logging import get_logger
from safe_monads.errors import UnwrapFailureError, UnwrapSuccessError
from safe_monads.option import Nothing, NothingType, Option, Some, maybe

__all__ = ['Fail', 'Ok', 'Result', 'catch_result', 'fail', 'ok', 'sequence']

_log = get_logger(__name__)


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> ok(42).unwrap()
        42
        >>> ok(42).map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_fail(self) -> TypeIs[Fail[Any]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_fail(self) -> NoReturn:
        """Raise since an Ok has no failure to unwrap.

        Raises:
            UnwrapSuccessError: Always.
        """
        _log.debug('result.unwrap_fail_on_ok', value=repr(self.value))
        raise UnwrapSuccessError(self.value)

    def maybe_ok(self) -> Option[T]:
        """Project the value into an Option."""
        return maybe(self.value)

    def maybe_fail(self) -> NothingType:
        """Return Nothing since this is Ok."""
        return Nothing

    def match[R](self, *, ok: Callable[[T], R], fail: Callable[[Any], R]) -> R:  # noqa: ARG002
        """Return the result of the ``ok`` handler applied to the value."""
        return ok(self.value)

    def map[U](self, fn: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            fn: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying fn to the value.
        """
        return Ok(fn(self.value))

    def map_fail(self, _fn: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def flat_map[U, E](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply a function that returns a Result to the contained value.

        Args:
            fn: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by fn.
        """
        return fn(self.value)

    async def flat_map_awaitable[U](self, fn: Callable[[T], Awaitable[U]]) -> Result[U, Exception]:
        """Await fn(value) and wrap the outcome.

        Returns:
            Ok with the awaited value, or Fail with the Exception it raised.

        Example:
            ```python
            saved = await ok(user).flat_map_awaitable(repository.save)
            ```
        """
        try:
            return Ok(await fn(self.value))
        except Exception as e:
            _log.debug('result.caught', error=repr(e))
            return Fail(e)

    def flat_map_maybe[U, E](self, fn: Callable[[T], Option[U]], error: E) -> Result[U, E]:
        """Bind an Option-returning function, failing with ``error`` on Nothing."""
        projected = fn(self.value)
        if isinstance(projected, Some):
            return Ok(projected.value)
        return Fail(error)

    def to_fail_when_ok[E](self, fn: Callable[[T], E]) -> Fail[E]:
        """Turn this success into a failure computed from its value."""
        return Fail(fn(self.value))

    def to_fail_when_ok_from[E](self, error: E) -> Fail[E]:
        """Turn this success into the given failure."""
        return Fail(error)

    def tap(
        self,
        *,
        ok: Callable[[T], object] | None = None,
        fail: Callable[[Any], object] | None = None,  # noqa: ARG002
    ) -> None:
        """Run the ``ok`` handler with the value, if one was given."""
        if ok is not None:
            ok(self.value)

    def tap_ok(self, fn: Callable[[T], object]) -> None:
        """Run fn with the contained value."""
        fn(self.value)

    def tap_fail(self, fn: Callable[[Any], object]) -> None:
        """Do nothing since this is Ok."""

    def tap_thru(
        self,
        *,
        ok: Callable[[T], object] | None = None,
        fail: Callable[[Any], object] | None = None,
    ) -> Ok[T]:
        """Like `tap()`, but return self for chaining."""
        self.tap(ok=ok, fail=fail)
        return self

    def tap_ok_thru(self, fn: Callable[[T], object]) -> Ok[T]:
        """Run fn with the contained value and return self."""
        fn(self.value)
        return self

    def tap_fail_thru(self, _fn: Callable[[Any], object]) -> Ok[T]:
        """Return self without running fn."""
        return self

    def recover(self, _fn: Callable[[Any], T]) -> Ok[T]:
        """Return self unchanged since there is nothing to recover from."""
        return self

    def recover_with(self, _fn: Callable[[Any], Result[T, Any]]) -> Ok[T]:
        """Return self unchanged since there is nothing to recover from."""
        return self

    def or_else(self, _fallback: Result[T, Any]) -> Ok[T]:
        """Return self, ignoring the fallback."""
        return self

    def swap(self) -> Fail[T]:
        """Move the value to the failure channel."""
        return Fail(self.value)

    def zip_with[U, R, E](self, other: Result[U, E], fn: Callable[[T, U], R]) -> Result[R, E]:
        """Combine two successes with fn; return ``other`` if it failed."""
        if isinstance(other, Ok):
            return Ok(fn(self.value, other.value))
        return other


class Fail[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Result containing an error of type E.

    Examples:
        >>> fail('boom').is_fail()
        True
        >>> fail('boom').unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Fail."""
        return False

    def is_fail(self) -> TypeIs[Fail[E]]:
        """Return True since this is Fail.

        This method provides type narrowing - after checking is_fail(),
        the type checker knows the result is Fail[E].
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise since a Fail has no success value to unwrap.

        Raises:
            UnwrapFailureError: Always. The original error is attached as
                ``.error``.
        """
        _log.debug('result.unwrap_on_fail', error=repr(self.error))
        raise UnwrapFailureError(self.error)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Fail."""
        return default

    def unwrap_fail(self) -> E:
        """Return the contained error."""
        return self.error

    def maybe_ok(self) -> NothingType:
        """Return Nothing since this is Fail."""
        return Nothing

    def maybe_fail(self) -> Option[E]:
        """Project the error into an Option."""
        return maybe(self.error)

    def match[R](self, *, ok: Callable[[Any], R], fail: Callable[[E], R]) -> R:  # noqa: ARG002
        """Return the result of the ``fail`` handler applied to the error."""
        return fail(self.error)

    def map(self, _fn: Callable[[Any], Any]) -> Fail[E]:
        """Return self unchanged since this is Fail."""
        return self

    def map_fail[F](self, fn: Callable[[E], F]) -> Fail[F]:
        """Apply a function to the contained error.

        Args:
            fn: Function to apply to the error value.

        Returns:
            Fail containing the transformed error.
        """
        return Fail(fn(self.error))

    def flat_map(self, _fn: Callable[[Any], Any]) -> Fail[E]:
        """Return self without calling fn."""
        return self

    async def flat_map_awaitable(self, _fn: Callable[[Any], Awaitable[Any]]) -> Fail[E]:
        """Return self without calling fn."""
        return self

    def flat_map_maybe(self, _fn: Callable[[Any], Any], _error: object) -> Fail[E]:
        """Return self without calling fn."""
        return self

    def to_fail_when_ok(self, _fn: Callable[[Any], Any]) -> Fail[E]:
        """Return self unchanged since this is already Fail."""
        return self

    def to_fail_when_ok_from(self, _error: object) -> Fail[E]:
        """Return self unchanged since this is already Fail."""
        return self

    def tap(
        self,
        *,
        ok: Callable[[Any], object] | None = None,  # noqa: ARG002
        fail: Callable[[E], object] | None = None,
    ) -> None:
        """Run the ``fail`` handler with the error, if one was given."""
        if fail is not None:
            fail(self.error)

    def tap_ok(self, fn: Callable[[Any], object]) -> None:
        """Do nothing since this is Fail."""

    def tap_fail(self, fn: Callable[[E], object]) -> None:
        """Run fn with the contained error."""
        fn(self.error)

    def tap_thru(
        self,
        *,
        ok: Callable[[Any], object] | None = None,
        fail: Callable[[E], object] | None = None,
    ) -> Fail[E]:
        """Like `tap()`, but return self for chaining."""
        self.tap(ok=ok, fail=fail)
        return self

    def tap_ok_thru(self, _fn: Callable[[Any], object]) -> Fail[E]:
        """Return self without running fn."""
        return self

    def tap_fail_thru(self, fn: Callable[[E], object]) -> Fail[E]:
        """Run fn with the contained error and return self."""
        fn(self.error)
        return self

    def recover[T](self, fn: Callable[[E], T]) -> Ok[T]:
        """Turn the failure into a success computed from the error."""
        return Ok(fn(self.error))

    def recover_with[T, F](self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Replace the failure with the Result returned by fn."""
        return fn(self.error)

    def or_else[T, F](self, fallback: Result[T, F]) -> Result[T, F]:
        """Return the fallback since this is Fail."""
        return fallback

    def swap(self) -> Ok[E]:
        """Move the error to the success channel."""
        return Ok(self.error)

    def zip_with(self, _other: object, _fn: Callable[..., Any]) -> Fail[E]:
        """Return self since this is Fail."""
        return self


type Result[T, E = Exception] = Ok[T] | Fail[E]


def ok[T](value: T) -> Ok[T]:
    """Build a successful Result."""
    return Ok(value)


def fail[E](error: E) -> Fail[E]:
    """Build a failed Result."""
    return Fail(error)


def sequence[T, E](results: Iterable[Result[T, E]]) -> Ok[list[T]] | Fail[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Fail encountered.

    Examples:
        >>> sequence([ok(1), ok(2), ok(3)])
        Ok(value=[1, 2, 3])
        >>> sequence([ok(1), fail('boom'), ok(3)])
        Fail(error='boom')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Fail):
            return result
        values.append(result.value)
    return Ok(values)


def catch_result[T](fn: Callable[[], T]) -> Ok[T] | Fail[Exception]:
    """Run a thunk, capturing any raised Exception as Fail.

    Examples:
        >>> catch_result(lambda: int('7'))
        Ok(value=7)
        >>> catch_result(lambda: int('x')).is_fail()
        True
    """
    try:
        return Ok(fn())
    except Exception as e:
        _log.debug('result.caught', error=repr(e))
        return Fail(e)
