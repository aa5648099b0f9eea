"""Environment variable lookup returning Option."""

from __future__ import annotations

import os
from typing import Protocol, runtime_checkable

from safe_monads.option import Option, maybe
from safe_monads.reader import Reader, reader

__all__ = ['DEFAULT_ENV_READER', 'EnvReader', 'OsEnvReader', 'maybe_env']


@runtime_checkable
class EnvReader(Protocol):
    """Source of string settings looked up by key."""

    def read_env(self, key: str) -> str | None: ...


class OsEnvReader:
    """Reads settings from the process environment."""

    __slots__ = ()

    def read_env(self, key: str) -> str | None:
        return os.environ.get(key)


DEFAULT_ENV_READER: EnvReader = OsEnvReader()


def _lookup(key: str) -> Reader[EnvReader, Option[str]]:
    return reader(lambda env_reader: maybe(env_reader.read_env(key)))


def maybe_env(key: str, env_reader: EnvReader | None = None) -> Option[str]:
    """Look up ``key`` and return it as an Option.

    Args:
        key: Variable name.
        env_reader: Where to read from. Defaults to the process environment.

    Example:
        ```python
        maybe_env('PORT').map(int).value_or(8080)
        maybe_env('token', SecretsReader()).value_or_throw('token is required')
        ```
    """
    return _lookup(key).run(maybe(env_reader).value_or(DEFAULT_ENV_READER))
