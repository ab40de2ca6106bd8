"""Value conversions: checked construction, display and byte casts."""

from __future__ import annotations

import math
from dataclasses import dataclass

_U8_MAX = 255


@dataclass(frozen=True)
class Number:
    """A wrapped integer."""

    value: int


@dataclass(frozen=True)
class EvenNum:
    """An integer that is guaranteed to be even."""

    value: int

    def __post_init__(self) -> None:
        if self.value % 2 != 0:
            raise ValueError(f"{self.value} is not even number.")


@dataclass(frozen=True)
class DisplayPoint:
    """A point that describes itself in words."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"The point is ({self.x}, {self.y})"


def saturating_u8(value: float) -> int:
    """Truncate toward zero and clamp into 0..255; NaN becomes 0."""
    if math.isnan(value):
        return 0
    if value >= _U8_MAX:
        return _U8_MAX
    if value <= 0:
        return 0
    return math.trunc(value)


def wrapping_u8(value: int) -> int:
    """Keep the low eight bits of ``value``, as a two's-complement cast does."""
    return value & _U8_MAX