"""Adjacency rule checks for candidate word placements."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..core.constants import Direction, Location
from ..core.exceptions import PlacementRejected

if TYPE_CHECKING:
    from .board import Board


class PlacementValidator:
    """Decides whether a word may be written at a location without side effects.

    A placement is legal when the word stays on the board, agrees with every
    letter it overlaps, never shares two consecutive letters with existing
    words, leaves its non-crossing letters without perpendicular neighbours,
    has empty cells directly before and after it, and crosses at least one
    existing word.
    """

    def __init__(self, board: "Board") -> None:
        self.board = board

    def can_place(self, start: Location, word: str, direction: Direction) -> bool:
        return self.rejection_reason(start, word, direction) is None

    def check(self, start: Location, word: str, direction: Direction) -> None:
        reason = self.rejection_reason(start, word, direction)
        if reason is not None:
            raise PlacementRejected(reason)

    def rejection_reason(self, start: Location, word: str, direction: Direction) -> Optional[str]:
        """Return why the placement is illegal, or ``None`` if it is allowed."""

        board = self.board
        if not word:
            return "empty word"

        dx, dy = direction.delta
        length = len(word)
        last = start.offset(dx * (length - 1), dy * (length - 1))
        if not board.contains(start) or not board.contains(last):
            return "outside board"

        intersected = False
        consecutive = 0
        flanks = direction.perpendicular
        for index, letter in enumerate(word):
            location = start.offset(dx * index, dy * index)
            cell = board.cell(location)
            if cell.filled:
                if cell.character != letter:
                    return f"letter conflict at ({location.x},{location.y})"
                intersected = True
                consecutive += 1
                if consecutive >= 2:
                    return "consecutive intersections"
                continue

            consecutive = 0
            for fx, fy in flanks:
                if board.is_filled(location.offset(fx, fy)):
                    return f"parallel neighbour at ({location.x},{location.y})"

        before, after = board.boundary_locations(start, length, direction)
        if board.is_filled(before) or board.is_filled(after):
            return "not isolated"

        if not intersected:
            return "no intersection"
        return None
