"""Safe navigation of nested data by dot-delimited path."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from safe_monads.option import Nothing, Option, maybe

__all__ = ['maybe_props']


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return '<missing>'


_MISSING = _Missing()


def _is_index(segment: str) -> bool:
    return segment.isascii() and segment.isdigit()


def _read(current: Any, segment: str) -> Any:
    """Read one segment from current, or return _MISSING."""
    if isinstance(current, str | bytes | bytearray):
        return _MISSING
    if isinstance(current, Sequence):
        if not _is_index(segment):
            return _MISSING
        index = int(segment)
        return current[index] if index < len(current) else _MISSING
    if isinstance(current, Mapping):
        if segment in current:
            return current[segment]
        # non-string keys, e.g. {0: ...}
        if _is_index(segment) and int(segment) in current:
            return current[int(segment)]
        return _MISSING
    return getattr(current, segment, _MISSING)


def maybe_props[R](path: str) -> Callable[[Any], Option[R]]:
    """Build an accessor that resolves ``path`` against nested data.

    Segments are split on ``.``. A non-negative integer segment indexes into
    any sequence other than a string; other segments are mapping keys, or
    attribute names for plain objects such as dataclasses. The first missing
    read or None along the way yields Nothing.

    Args:
        path: Dot-separated path, e.g. ``'users.0.name'``.

    Returns:
        A pure function from a root value to an Option of the resolved value.

    Examples:
        >>> get_name = maybe_props('users.0.name')
        >>> get_name({'users': [{'name': 'User 1'}]})
        Some(value='User 1')
        >>> get_name({'users': []})
        NothingType()
    """
    segments = tuple(path.split('.'))

    def resolve(root: Any) -> Option[R]:
        current = root
        for segment in segments:
            if current is None:
                return Nothing
            current = _read(current, segment)
            if current is _MISSING:
                return Nothing
        return maybe(current)

    return resolve
