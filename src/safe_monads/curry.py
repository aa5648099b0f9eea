"""Currying helpers for fixed-arity functions.

``curryN(f)`` turns an N-argument function into a chain of N single-argument
calls. ``f`` runs once, when the last argument arrives. Arity is not checked.

Example:
    ```python
    add = curry2(lambda a, b: a + b)
    add(1)(2)  # 3
    increment = add(1)
    list(map(increment, [1, 2, 3]))  # [2, 3, 4]
    ```
"""

from __future__ import annotations

from collections.abc import Callable

__all__ = ['curry2', 'curry3', 'curry4', 'curry5', 'curry6', 'curry7']


def curry2[T1, T2, R](fn: Callable[[T1, T2], R]) -> Callable[[T1], Callable[[T2], R]]:
    return lambda a1: lambda a2: fn(a1, a2)


def curry3[T1, T2, T3, R](
    fn: Callable[[T1, T2, T3], R],
) -> Callable[[T1], Callable[[T2], Callable[[T3], R]]]:
    return lambda a1: lambda a2: lambda a3: fn(a1, a2, a3)


def curry4[T1, T2, T3, T4, R](
    fn: Callable[[T1, T2, T3, T4], R],
) -> Callable[[T1], Callable[[T2], Callable[[T3], Callable[[T4], R]]]]:
    return lambda a1: lambda a2: lambda a3: lambda a4: fn(a1, a2, a3, a4)


def curry5[T1, T2, T3, T4, T5, R](
    fn: Callable[[T1, T2, T3, T4, T5], R],
) -> Callable[[T1], Callable[[T2], Callable[[T3], Callable[[T4], Callable[[T5], R]]]]]:
    return lambda a1: lambda a2: lambda a3: lambda a4: lambda a5: fn(a1, a2, a3, a4, a5)


def curry6[T1, T2, T3, T4, T5, T6, R](
    fn: Callable[[T1, T2, T3, T4, T5, T6], R],
) -> Callable[
    [T1], Callable[[T2], Callable[[T3], Callable[[T4], Callable[[T5], Callable[[T6], R]]]]]
]:
    return lambda a1: lambda a2: lambda a3: lambda a4: lambda a5: lambda a6: fn(
        a1, a2, a3, a4, a5, a6
    )


def curry7[T1, T2, T3, T4, T5, T6, T7, R](
    fn: Callable[[T1, T2, T3, T4, T5, T6, T7], R],
) -> Callable[
    [T1],
    Callable[[T2], Callable[[T3], Callable[[T4], Callable[[T5], Callable[[T6], Callable[[T7], R]]]]]],
]:
    return lambda a1: lambda a2: lambda a3: lambda a4: lambda a5: lambda a6: lambda a7: fn(
        a1, a2, a3, a4, a5, a6, a7
    )
