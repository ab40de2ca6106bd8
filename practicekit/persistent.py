"""An immutable singly linked list whose tails are shared."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class _Node:
    value: Any
    next: _Node | None


class PersistentList(Generic[T]):
    """A list that never changes; ``prepend`` and ``tail`` return new lists."""

    __slots__ = ("_head",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        head: _Node | None = None
        for value in reversed(list(items)):
            head = _Node(value, head)
        self._head = head

    @classmethod
    def _with_head(cls, head: _Node | None) -> PersistentList[T]:
        result = cls.__new__(cls)
        result._head = head
        return result

    def prepend(self, value: T) -> PersistentList[T]:
        """Return a new list with ``value`` in front of this one."""
        return self._with_head(_Node(value, self._head))

    def tail(self) -> PersistentList[T]:
        """Return the list without its first value; empty stays empty."""
        return self._with_head(self._head.next if self._head is not None else None)

    def peek(self) -> T:
        """Return the first value."""
        if self._head is None:
            raise IndexError("peek at an empty list")
        return self._head.value

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"