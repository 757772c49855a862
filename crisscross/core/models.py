"""Data models supporting the crossword filler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import Direction, Location


@dataclass
class Cell:
    """Represents a grid cell with its crossing bookkeeping."""

    character: Optional[str] = None
    locked: bool = False
    usage_count: int = 0
    lock_count: int = 0

    @property
    def filled(self) -> bool:
        return self.character is not None

    def is_empty(self) -> bool:
        return self.character is None

    def __str__(self) -> str:
        return self.character if self.character is not None else "."


@dataclass(frozen=True)
class PlacedWord:
    """A word currently on the board."""

    start: Location
    direction: Direction
    text: str

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def end(self) -> Location:
        dx, dy = self.direction.delta
        return self.start.offset(dx * (self.length - 1), dy * (self.length - 1))

    def matches(self, start: Location, text: str, direction: Direction) -> bool:
        return self.start == start and self.text == text and self.direction == direction
