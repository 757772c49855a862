"""Best-solution bookkeeping for partial searches."""

from __future__ import annotations

from typing import List, Tuple

from ..core.models import Cell, PlacedWord
from ..utils.logger import get_logger
from .board import Board, BoardSnapshot


LOGGER = get_logger(__name__)


class BestSolutionTracker:
    """Keeps ``board.best`` pointing at the fullest state reached so far."""

    def __init__(self, board: Board) -> None:
        self.board = board

    def capture(self) -> BoardSnapshot:
        snapshot = self.board.snapshot()
        self.board.best = snapshot
        LOGGER.debug("Captured best solution with %d words", snapshot.word_count)
        return snapshot

    def improve(self) -> bool:
        """Capture only when the live board beats the recorded best."""
        if self.board.word_count > self.best_count:
            self.capture()
            return True
        return False

    @property
    def best_count(self) -> int:
        best = self.board.best
        return best.word_count if best is not None else 0

    @property
    def best_cells(self) -> List[List[Cell]]:
        best = self.board.best
        return best.rows() if best is not None else []

    @property
    def best_placed_words(self) -> Tuple[PlacedWord, ...]:
        best = self.board.best
        return best.placed_words if best is not None else ()
