"""Shared constants and enumerations for the crossword filler."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


DEFAULT_MAX_BACKTRACKS = 50_000
DEFAULT_BOARD_SIZE = 10
DENSITY_FACTOR = 1.2
PADDING_FACTOR = 0.3


@dataclass(frozen=True)
class Location:
    """A point in the grid; ``x`` is the column and ``y`` the row."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Location":
        return Location(self.x + dx, self.y + dy)


class Direction(str, Enum):
    """Word directions supported by the grid, in candidate order."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def delta(self) -> Tuple[int, int]:
        """Return the ``(dx, dy)`` step between consecutive letters."""
        if self is Direction.ACROSS:
            return (1, 0)
        return (0, 1)

    @property
    def perpendicular(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """Offsets of the two cells flanking a letter across the word axis."""
        if self is Direction.ACROSS:
            return ((0, -1), (0, 1))
        return ((-1, 0), (1, 0))


@dataclass(frozen=True)
class Bounds:
    """Inclusive rectangle between two corner locations."""

    top_left: Location
    bottom_right: Location

    @classmethod
    def from_size(cls, width: int, height: int) -> "Bounds":
        return cls(Location(0, 0), Location(width - 1, height - 1))

    @property
    def width(self) -> int:
        return self.bottom_right.x - self.top_left.x + 1

    @property
    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y + 1

    def contains(self, location: Location) -> bool:
        return (
            self.top_left.x <= location.x <= self.bottom_right.x
            and self.top_left.y <= location.y <= self.bottom_right.y
        )
