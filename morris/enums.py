# File: morris/enums.py
from enum import Enum


class Color(Enum):
    WHITE = "white"
    BLACK = "black"

    def other(self):
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    def __str__(self):
        return f"{self.value} ({GLYPHS[Occupancy.of(self)]})"


class Phase(Enum):
    PLACING = "placing"
    MOVING = "moving"


class Occupancy(Enum):
    """What a single board position holds."""

    EMPTY = "empty"
    WHITE = "white"
    BLACK = "black"

    @classmethod
    def of(cls, color):
        return cls.WHITE if color is Color.WHITE else cls.BLACK


class Direction(Enum):
    # values index into a topology neighbour tuple
    ABOVE = 0
    LEFT = 1
    RIGHT = 2
    BELOW = 3


GLYPHS = {
    Occupancy.EMPTY: "·",
    Occupancy.WHITE: "○",
    Occupancy.BLACK: "●",
}
