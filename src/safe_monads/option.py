"""Option type: Some[T] | Nothing for values that may be absent.

A value is absent if and only if it is ``None``. Falsy values such as ``0``,
``''``, ``False`` or ``[]`` are present and flow through every operation like
any other value.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from safe_monads._logging import get_logger
from safe_monads.errors import EmptyValueError

if TYPE_CHECKING:
    from safe_monads.result import Fail, Ok

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'maybe', 'none', 'some']

_log = get_logger(__name__)


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. Build it through `maybe()` when
    the input may be ``None``; constructing ``Some(None)`` directly is an error.

    Examples:
        >>> maybe(42).map(lambda x: x * 2)
        Some(value=84)
        >>> maybe(0).value_or(10)
        0
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise TypeError('Some cannot hold None; use maybe() for optional values')

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def of[U](self, value: U | None) -> Option[U]:
        """Wrap another value in an Option (the monadic unit)."""
        return maybe(value)

    def value_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def value_or_none(self) -> T:
        """Return the contained value."""
        return self.value

    def value_or_compute(self, supplier: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the supplier."""
        return self.value

    def value_or_throw(self, msg: str | None = None) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the message."""
        return self.value

    def value_or_throw_err(self, err: BaseException | None = None) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the error."""
        return self.value

    def to_list(self) -> list[Any] | tuple[Any, ...]:
        """Return the value as a sequence.

        A list or tuple value is returned unchanged rather than wrapped again;
        any other value becomes a single-element list.
        """
        if isinstance(self.value, list | tuple):
            return self.value
        return [self.value]

    def tap(
        self,
        *,
        some: Callable[[T], object] | None = None,
        none: Callable[[], object] | None = None,  # noqa: ARG002
    ) -> None:
        """Run the ``some`` handler with the value, if one was given."""
        if some is not None:
            some(self.value)

    def tap_some(self, fn: Callable[[T], object]) -> None:
        """Run fn with the contained value."""
        fn(self.value)

    def tap_none(self, fn: Callable[[], object]) -> None:
        """Do nothing since this is Some."""

    def match[R](self, *, some: Callable[[T], R], none: Callable[[], R]) -> R:  # noqa: ARG002
        """Return the result of the ``some`` handler applied to the value."""
        return some(self.value)

    def map[U](self, fn: Callable[[T], U | None]) -> Option[U]:
        """Apply a function to the contained value.

        Args:
            fn: Function to apply to the Some value.

        Returns:
            An Option of the result; Nothing if fn returned None.
        """
        return maybe(fn(self.value))

    def map_to[U](self, value: U | None) -> Option[U]:
        """Replace the contained value, keeping presence."""
        return maybe(value)

    def flat_map[U](self, fn: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Also known as bind.

        Args:
            fn: Function that takes T and returns Option[U].

        Returns:
            The Option returned by fn.
        """
        return fn(self.value)

    def flat_map_auto[U](self, fn: Callable[[T], U | None]) -> Option[U]:
        """Apply fn and wrap its result with `maybe()`."""
        return maybe(fn(self.value))

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return self if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.
        """
        if predicate(self.value):
            return self
        return Nothing

    def apply[U](self, maybe_fn: Option[Callable[[T], U | None]]) -> Option[U]:
        """Apply a function held in another Option to the contained value."""
        if isinstance(maybe_fn, Some):
            return maybe(maybe_fn.value(self.value))
        return Nothing

    def to_result[E](self, error: E) -> Ok[T]:  # noqa: ARG002
        """Convert to Result, returning Ok(value)."""
        from safe_monads.result import Ok

        return Ok(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.value_or(0)
        0
    """

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def of[U](self, value: U | None) -> Option[U]:
        """Wrap another value in an Option (the monadic unit)."""
        return maybe(value)

    def value_or[T](self, default: T) -> T:
        """Return the default since this is Nothing."""
        return default

    def value_or_none(self) -> None:
        """Return None since this is Nothing."""
        return None

    def value_or_compute[T](self, supplier: Callable[[], T]) -> T:
        """Compute and return a default since this is Nothing."""
        return supplier()

    def value_or_throw(self, msg: str | None = None) -> NoReturn:
        """Raise since there is no value.

        Args:
            msg: Optional message for the raised error.

        Raises:
            EmptyValueError: Always.
        """
        _log.debug('option.empty_value', message=msg)
        raise EmptyValueError(msg)

    def value_or_throw_err(self, err: BaseException | None = None) -> NoReturn:
        """Raise ``err`` if it is an exception, else a bare EmptyValueError."""
        _log.debug('option.empty_value', error=repr(err))
        if isinstance(err, BaseException):
            raise err
        raise EmptyValueError

    def to_list(self) -> list[Any]:
        """Return an empty list."""
        return []

    def tap(
        self,
        *,
        some: Callable[[Any], object] | None = None,  # noqa: ARG002
        none: Callable[[], object] | None = None,
    ) -> None:
        """Run the ``none`` handler, if one was given."""
        if none is not None:
            none()

    def tap_some(self, fn: Callable[[Any], object]) -> None:
        """Do nothing since this is Nothing."""

    def tap_none(self, fn: Callable[[], object]) -> None:
        """Run fn."""
        fn()

    def match[R](self, *, some: Callable[[Any], R], none: Callable[[], R]) -> R:  # noqa: ARG002
        """Return the result of the ``none`` handler."""
        return none()

    def map(self, _fn: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def map_to(self, _value: object) -> NothingType:
        """Return Nothing since there's no value to replace."""
        return self

    def flat_map(self, _fn: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def flat_map_auto(self, _fn: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def filter(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing without calling the predicate."""
        return self

    def apply(self, _maybe_fn: object) -> NothingType:
        """Return Nothing since there's no value to apply to."""
        return self

    def to_result[E](self, error: E) -> Fail[E]:
        """Convert to Result, returning Fail(error)."""
        from safe_monads.result import Fail

        return Fail(error)


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def maybe[T](value: T | None = None) -> Option[T]:
    """Wrap a possibly-None value in an Option.

    Examples:
        >>> maybe('')
        Some(value='')
        >>> maybe(None)
        NothingType()
    """
    if value is None:
        return Nothing
    return Some(value)


def some[T](value: T | None) -> Option[T]:
    """Alias of `maybe()`; a None value still yields Nothing."""
    return maybe(value)


def none() -> NothingType:
    """Return the empty Option."""
    return Nothing
