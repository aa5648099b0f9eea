"""Library configuration: LibraryConfig and initialization."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from safe_monads._logging import configure_logging
from safe_monads.env import EnvReader, maybe_env
from safe_monads.option import maybe

__all__ = [
    'LOG_JSON_ENV',
    'LOG_LEVEL_ENV',
    'LibraryConfig',
    'get_config',
    'init',
]

LOG_LEVEL_ENV = 'SAFE_MONADS_LOG_LEVEL'
LOG_JSON_ENV = 'SAFE_MONADS_LOG_JSON'

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
_FALSE_STRINGS = ('0', 'false', 'no', 'off')


@dataclass(frozen=True)
class LibraryConfig:
    """Configuration for safe-monads.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render log events as JSON rather than console text.
    """

    log_level: str | None = None
    json_output: bool = True


# Global configuration (set by init())
_config: LibraryConfig | None = None


def _resolve_level(level: str) -> str:
    upper = level.strip().upper()
    if upper not in _LEVELS:
        logging.warning("Unknown log level '%s', defaulting to INFO", level)
        return 'INFO'
    return upper


def _detect_json_output(env_reader: EnvReader | None) -> bool:
    return (
        maybe_env(LOG_JSON_ENV, env_reader)
        .map(lambda raw: raw.strip().lower() not in _FALSE_STRINGS)
        .value_or(True)
    )


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
    *,
    env_reader: EnvReader | None = None,
) -> LibraryConfig:
    """Initialize safe-monads with the given configuration.

    Unspecified values are read from ``SAFE_MONADS_LOG_LEVEL`` and
    ``SAFE_MONADS_LOG_JSON``.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: Emit JSON logs. Defaults to True.
        env_reader: Where to read environment settings from. Defaults to the
            process environment.

    Returns:
        The LibraryConfig that was set.

    Example:
        ```python
        import safe_monads

        safe_monads.init(log_level='DEBUG', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = (
        maybe(log_level)
        .value_or_compute(lambda: maybe_env(LOG_LEVEL_ENV, env_reader).value_or_none())
    )
    if resolved_level is not None:
        resolved_level = _resolve_level(resolved_level)

    resolved_json = json_output if json_output is not None else _detect_json_output(env_reader)

    _config = LibraryConfig(log_level=resolved_level, json_output=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> LibraryConfig:
    """Get the current configuration, or the defaults if init() was not called."""
    if _config is None:
        return LibraryConfig()
    return _config
