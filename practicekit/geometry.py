"""Generic points that add and describe themselves, and a multi-role human."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T")
U = TypeVar("U")
W = TypeVar("W")


class Summarizable(Protocol):
    def summarize(self) -> str: ...


def _display(value: Any) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        if value.is_integer():
            return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Point(Generic[T, U]):
    """A pair of coordinates, which may be of different types."""

    x: T
    y: U

    def __add__(self, other: object) -> Point[Any, Any]:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)  # type: ignore[operator]

    def summarize(self) -> str:
        """Describe the point as ``Point{x: .., y: ..}``."""
        return f"Point{{x: {_display(self.x)}, y: {_display(self.y)}}}"

    def mixup(self, other: Point[Any, W]) -> Point[T, W]:
        """Return a point with this x and the other point's y."""
        return Point(self.x, other.y)


def summarize(item: Summarizable) -> str:
    """Return the summary of anything that can summarize itself."""
    return item.summarize()


class Human:
    """Someone who flies differently depending on the role asked for."""

    def fly(self) -> str:
        return "*waving arms furiously*"

    def pilot_fly(self) -> str:
        return "This is your captain speaking."

    def wizard_fly(self) -> str:
        return "Up!"