"""A distance type and a small arithmetic operation enum."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class Meters:
    """A non-negative whole number of meters."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _U32_MAX:
            raise ValueError(f"{self.value} is out of range for a distance in meters")

    def __add__(self, other: object) -> Meters:
        if not isinstance(other, Meters):
            return NotImplemented
        return Meters(self.value + other.value)

    def __str__(self) -> str:
        return f"{self.value} meters"


class Operation(enum.Enum):
    """A binary operation on two integers."""

    ADD = "add"
    SUBTRACT = "subtract"

    def run(self, x: int, y: int) -> int:
        """Apply this operation to ``x`` and ``y``."""
        if self is Operation.ADD:
            return x + y
        return x - y