"""Logging for safe-monads, built on structlog.

The package only logs at debug level: right before a boundary assertion
raises, and wherever an exception is captured into a Result or an Option.
Events go to stdlib loggers named after the emitting module, for example
``safe_monads.option``. They are dropped by a level check before any structlog
processing, so a host that never enables debug logging pays almost nothing.

`configure_logging()` is for hosts without a logging setup of their own. It
routes structlog events and plain stdlib records through one stderr handler.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any

import structlog

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

type LogHook = Callable[[dict[str, Any]], None]

_hooks: list[LogHook] = []


def add_log_hook(hook: LogHook) -> None:
    """Call ``hook`` with a copy of every event that reaches the handler.

    Hooks only fire once `configure_logging()` has installed the processor
    chain. An exception raised by a hook is ignored.
    """
    _hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister ``hook``. Unknown hooks are ignored."""
    if hook in _hooks:
        _hooks.remove(hook)


def clear_log_hooks() -> None:
    _hooks.clear()


def _notify_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in tuple(_hooks):
        try:
            hook(dict(event_dict))
        except Exception:  # noqa: BLE001
            continue
    return event_dict


def _enrichers() -> list[Any]:
    """Processors shared by structlog events and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _notify_hooks,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Send structlog and stdlib logging to stderr through one formatter.

    This replaces the root logger's handlers. Call it once at startup.

    Args:
        level: Root level name such as ``'DEBUG'`` or ``'WARNING'``. Unknown
            names mean INFO.
        json_output: Render one JSON object per line. When False, render
            console text, colored if stderr is a terminal.
    """
    structlog.configure(
        processors=[
            *_enrichers(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_enrichers(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))


def _run_active_processors(logger: Any, method_name: str, event_dict: dict[str, Any]) -> Any:
    """Apply the processor chain structlog is configured with right now."""
    result: Any = event_dict
    for processor in structlog.get_config()['processors']:
        result = processor(logger, method_name, result)
    return result


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger on top of the stdlib logger ``name``.

    An event below the stdlib logger's effective level is dropped first. Any
    other event goes through whatever structlog configuration is active when
    it is logged, whether that came from `configure_logging()` or from the host.

    Args:
        name: Logger name, usually the calling module's ``__name__``.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[structlog.stdlib.filter_by_level, _run_active_processors],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
