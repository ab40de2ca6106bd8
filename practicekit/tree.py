"""A tree whose children are owned by their parent and point back weakly."""

from __future__ import annotations

import weakref
from collections.abc import Iterable
from typing import Any


class Node:
    """A tree node; children are held strongly, the parent only weakly."""

    __slots__ = ("value", "children", "_parent", "__weakref__")

    def __init__(self, value: Any, children: Iterable[Node] = ()) -> None:
        self.value = value
        self.children: list[Node] = []
        self._parent: weakref.ref[Node] | None = None
        for child in children:
            self.add_child(child)

    @property
    def parent(self) -> Node | None:
        """The parent node, or None if there is none or it no longer exists."""
        return self._parent() if self._parent is not None else None

    def add_child(self, child: Node) -> Node:
        """Attach ``child`` under this node and return it."""
        child._parent = weakref.ref(self)
        self.children.append(child)
        return child

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value!r}, children={self.children!r})"