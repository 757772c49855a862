"""Board representation and placement mutators."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ..core.constants import Bounds, Direction, Location
from ..core.exceptions import ConfigurationError, PlacementError
from ..core.models import Cell, PlacedWord
from ..utils.logger import get_logger
from .validator import PlacementValidator


LOGGER = get_logger(__name__)


@dataclass
class BoardSnapshot:
    """Independent copy of a board state, detached from later mutation."""

    bounds: Bounds
    cells: List[Cell]
    placed_words: Tuple[PlacedWord, ...]
    word_count: int

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    def cell_at(self, x: int, y: int) -> Cell:
        location = Location(x, y)
        if not self.bounds.contains(location):
            raise IndexError(f"Location outside board: {(x, y)}")
        return self.cells[_flat_index(self.bounds, location)]

    def rows(self) -> List[List[Cell]]:
        return _split_rows(self.cells, self.bounds.width)


def _flat_index(bounds: Bounds, location: Location) -> int:
    return (location.y - bounds.top_left.y) * bounds.width + (location.x - bounds.top_left.x)


def _split_rows(cells: List[Cell], width: int) -> List[List[Cell]]:
    return [cells[offset : offset + width] for offset in range(0, len(cells), width)]


class Board:
    """Owns the cell grid and the words currently placed on it."""

    def __init__(self, bounds: Bounds, total_words: int) -> None:
        if bounds.width <= 0 or bounds.height <= 0:
            raise ConfigurationError(
                f"Board dimensions must be positive, got {bounds.width}x{bounds.height}"
            )
        if total_words < 0:
            raise ConfigurationError(f"Target word count cannot be negative: {total_words}")
        self.bounds = bounds
        self.cells: List[Cell] = [Cell() for _ in range(bounds.width * bounds.height)]
        self.placed_words: List[PlacedWord] = []
        self.word_count = 0
        self.total_words = total_words
        self.best: Optional[BoardSnapshot] = None
        self.validator = PlacementValidator(self)

    @classmethod
    def from_size(cls, width: int, height: int, total_words: int) -> "Board":
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"Board dimensions must be positive, got {width}x{height}")
        return cls(Bounds.from_size(width, height), total_words)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    def contains(self, location: Location) -> bool:
        return self.bounds.contains(location)

    def locations(self) -> Iterator[Location]:
        """Yield every location in row-major order."""
        for y in range(self.bounds.top_left.y, self.bounds.bottom_right.y + 1):
            for x in range(self.bounds.top_left.x, self.bounds.bottom_right.x + 1):
                yield Location(x, y)

    @staticmethod
    def word_locations(start: Location, length: int, direction: Direction) -> List[Location]:
        dx, dy = direction.delta
        return [start.offset(dx * i, dy * i) for i in range(length)]

    @staticmethod
    def boundary_locations(
        start: Location, length: int, direction: Direction
    ) -> Tuple[Location, Location]:
        """Return the cells directly before and after a word on its axis."""
        dx, dy = direction.delta
        return start.offset(-dx, -dy), start.offset(dx * length, dy * length)

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def cell(self, location: Location) -> Cell:
        if not self.bounds.contains(location):
            raise IndexError(f"Location outside board: {(location.x, location.y)}")
        return self.cells[_flat_index(self.bounds, location)]

    def cell_at(self, x: int, y: int) -> Cell:
        return self.cell(Location(x, y))

    def is_filled(self, location: Location) -> bool:
        """Out-of-bounds locations count as empty."""
        return self.bounds.contains(location) and self.cells[_flat_index(self.bounds, location)].filled

    def rows(self) -> List[List[Cell]]:
        return _split_rows(self.cells, self.bounds.width)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def can_place_word(self, start: Location, word: str, direction: Direction) -> bool:
        return self.validator.can_place(start, word, direction)

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def place_word(self, start: Location, word: str, direction: Direction) -> None:
        """Write ``word`` onto the board without checking adjacency rules."""

        if not word:
            raise PlacementError("Cannot place an empty word")
        locations = self.word_locations(start, len(word), direction)
        for location, letter in zip(locations, word):
            if not self.bounds.contains(location):
                raise PlacementError(f"Word '{word}' extends outside board at {location}")
            existing = self.cell(location).character
            if existing is not None and existing != letter:
                raise PlacementError(
                    f"Letter conflict at {location}: '{existing}' vs '{letter}'"
                )

        # All checks passed, mutate board
        for location, letter in zip(locations, word):
            cell = self.cell(location)
            cell.character = letter
            cell.usage_count += 1
        for boundary in self.boundary_locations(start, len(word), direction):
            if self.bounds.contains(boundary):
                self.cell(boundary).lock_count += 1

        self.placed_words.append(PlacedWord(start=start, direction=direction, text=word))
        self.word_count += 1
        LOGGER.debug(
            "Placed '%s' at (%d,%d) %s [%d/%d]",
            word,
            start.x,
            start.y,
            direction.value,
            self.word_count,
            self.total_words,
        )

    def remove_word(self, start: Location, word: str, direction: Direction) -> None:
        """Undo a previous :meth:`place_word` call with the same arguments."""

        index = next(
            (
                position
                for position, placed in enumerate(self.placed_words)
                if placed.matches(start, word, direction)
            ),
            None,
        )
        if index is None:
            raise PlacementError(
                f"Word '{word}' is not placed at ({start.x},{start.y}) {direction.value}"
            )

        for location in self.word_locations(start, len(word), direction):
            cell = self.cell(location)
            cell.usage_count -= 1
            if cell.usage_count == 0:
                cell.character = None
        for boundary in self.boundary_locations(start, len(word), direction):
            if self.bounds.contains(boundary):
                self.cell(boundary).lock_count -= 1

        del self.placed_words[index]
        self.word_count -= 1
        LOGGER.debug(
            "Removed '%s' from (%d,%d) %s [%d/%d]",
            word,
            start.x,
            start.y,
            direction.value,
            self.word_count,
            self.total_words,
        )

    def is_complete(self) -> bool:
        return self.word_count >= self.total_words

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------
    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            bounds=self.bounds,
            cells=copy.deepcopy(self.cells),
            placed_words=tuple(self.placed_words),
            word_count=self.word_count,
        )

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> List[List[dict]]:
        return cells_to_jsonable(self.rows())


def cells_to_jsonable(rows: List[List[Cell]]) -> List[List[dict]]:
    serialized: List[List[dict]] = []
    for row in rows:
        serialized.append(
            [
                {
                    "character": cell.character,
                    "locked": cell.locked,
                    "usage_count": cell.usage_count,
                    "lock_count": cell.lock_count,
                }
                for cell in row
            ]
        )
    return serialized
