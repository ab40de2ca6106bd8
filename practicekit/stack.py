"""A last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A stack whose iteration runs from the top down."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def push(self, value: T) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def replace_top(self, value: T) -> T:
        """Replace the top value and return the one it replaced."""
        old = self.peek()
        self._items[-1] = value
        return old

    def update(self, func: Callable[[T], T]) -> T:
        """Replace the top value with ``func(top)`` and return the new value."""
        new = func(self.peek())
        self._items[-1] = new
        return new

    def drain(self) -> Iterator[T]:
        """Pop values from the top until the stack is empty."""
        while self._items:
            yield self._items.pop()

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"