"""Remember the result of a function, and build offset functions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

_UNSET = object()
_OFFSET = 5
_THRESHOLD = 5


class Cacher(Generic[T]):
    """Call ``query`` once; every later call returns that first result."""

    __slots__ = ("_query", "_value")

    def __init__(self, query: Callable[[T], T]) -> None:
        self._query = query
        self._value: object = _UNSET

    def get_value(self, arg: T) -> T:
        """Return the cached value, computing it from ``arg`` the first time."""
        if self._value is _UNSET:
            self._value = self._query(arg)
        return self._value  # type: ignore[return-value]


def make_offset(x: int) -> Callable[[int], int]:
    """Return a function that subtracts 5 when ``x > 5``, otherwise adds 5."""
    if x > _THRESHOLD:
        return lambda value: value - _OFFSET
    return lambda value: value + _OFFSET