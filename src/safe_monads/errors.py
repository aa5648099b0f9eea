"""Error types raised by boundary assertions and Either construction."""

from __future__ import annotations

from typing import Any

__all__ = [
    'DEFAULT_EMPTY_MESSAGE',
    'EitherBothError',
    'EitherError',
    'EitherNeitherError',
    'EmptyValueError',
    'MonadError',
    'UnwrapError',
    'UnwrapFailureError',
    'UnwrapSuccessError',
]

DEFAULT_EMPTY_MESSAGE = 'Option has no value'


class MonadError(Exception):
    """Base class for every exception raised by safe-monads."""


# --- Option ---


class EmptyValueError(MonadError):
    """A value was demanded from an empty Option."""

    def __init__(self, message: str | None = None) -> None:
        self.message = message
        super().__init__(message if message is not None else DEFAULT_EMPTY_MESSAGE)


# --- Either ---


class EitherError(MonadError, TypeError):
    """Either was built with an invalid combination of channels."""


class EitherBothError(EitherError):
    """Both the left and the right channel were populated."""

    def __init__(self) -> None:
        super().__init__('Either cannot have both a left and a right')


class EitherNeitherError(EitherError):
    """Neither the left nor the right channel was populated."""

    def __init__(self) -> None:
        super().__init__('Either requires a left or a right')


# --- Result ---


class UnwrapError(MonadError):
    """A Result was unwrapped on the wrong channel."""


class UnwrapSuccessError(UnwrapError):
    """unwrap_fail() was called on an Ok."""

    def __init__(self, value: Any = None) -> None:
        self.value = value
        super().__init__('Cannot unwrap a success')


class UnwrapFailureError(UnwrapError):
    """unwrap() was called on a Fail."""

    def __init__(self, error: Any = None) -> None:
        self.error = error
        super().__init__('Cannot unwrap a failure')
