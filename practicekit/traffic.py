"""A traffic light and its colours."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TrafficLightColor(enum.Enum):
    """The colours a traffic light can show."""

    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"

    @property
    def color(self) -> str:
        """The colour's name."""
        return self.value


@dataclass
class TrafficLight:
    """A traffic light; a new one shows red."""

    color: TrafficLightColor = TrafficLightColor.RED

    @property
    def state(self) -> str:
        """The name of the colour currently shown."""
        return self.color.color

    def set_state(self, color: TrafficLightColor) -> None:
        """Switch the light to ``color``."""
        self.color = color