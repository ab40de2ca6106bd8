"""A double-ended queue with draining iteration from either end."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Deque(Generic[T]):
    """A queue that can be pushed to, popped from and peeked at both ends."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(items)

    def push_front(self, value: T) -> None:
        """Put ``value`` at the front."""
        self._items.appendleft(value)

    def push_back(self, value: T) -> None:
        """Put ``value`` at the back."""
        self._items.append(value)

    def pop_front(self) -> T:
        """Remove and return the front value."""
        if not self._items:
            raise IndexError("pop from an empty deque")
        return self._items.popleft()

    def pop_back(self) -> T:
        """Remove and return the back value."""
        if not self._items:
            raise IndexError("pop from an empty deque")
        return self._items.pop()

    def peek_front(self) -> T:
        """Return the front value without removing it."""
        if not self._items:
            raise IndexError("peek at an empty deque")
        return self._items[0]

    def peek_back(self) -> T:
        """Return the back value without removing it."""
        if not self._items:
            raise IndexError("peek at an empty deque")
        return self._items[-1]

    def set_front(self, value: T) -> T:
        """Replace the front value and return the one it replaced."""
        old = self.peek_front()
        self._items[0] = value
        return old

    def set_back(self, value: T) -> T:
        """Replace the back value and return the one it replaced."""
        old = self.peek_back()
        self._items[-1] = value
        return old

    def drain(self) -> DequeDrain[T]:
        """Return an iterator that pops values off either end of this deque."""
        return DequeDrain(self)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


class DequeDrain(Generic[T]):
    """Iterator that empties a Deque, from the front or from the back."""

    __slots__ = ("_source",)

    def __init__(self, source: Deque[T]) -> None:
        self._source = source

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        try:
            return self._source.pop_front()
        except IndexError:
            raise StopIteration from None

    def next_back(self) -> T:
        """Pop from the back; raise StopIteration once the deque is empty."""
        try:
            return self._source.pop_back()
        except IndexError:
            raise StopIteration from None