"""Backtracking search that places every pool word onto a board."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Union

from ..core.constants import DEFAULT_MAX_BACKTRACKS, Direction, Location
from ..core.exceptions import (BacktrackCeilingReached, ConfigurationError, PlacementError,
                               PlacementRejected, SearchExhausted)
from ..data.pool import WordPool
from ..utils.logger import get_logger
from .board import Board, BoardSnapshot
from .tracker import BestSolutionTracker


LOGGER = get_logger(__name__)


class SearchState(str, Enum):
    NOT_STARTED = "NOT_STARTED"
    SEEDING = "SEEDING"
    SEARCHING = "SEARCHING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


class SearchOutcome(str, Enum):
    COMPLETED = "COMPLETED"
    EXHAUSTED = "EXHAUSTED"
    CEILING_REACHED = "CEILING_REACHED"


@dataclass(frozen=True)
class Placement:
    start: Location
    direction: Direction


@dataclass
class SearchStats:
    """Per-run counters threaded through the recursion."""

    max_backtracks: int = DEFAULT_MAX_BACKTRACKS
    backtracks: int = 0
    placements: int = 0
    aborted: bool = False
    failed_word: Optional[str] = None

    def record_backtrack(self) -> None:
        self.backtracks += 1
        if self.backtracks > self.max_backtracks:
            self.aborted = True


@dataclass
class SearchResult:
    outcome: SearchOutcome
    word_count: int
    total_words: int
    stats: SearchStats
    best: Optional[BoardSnapshot] = None
    messages: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.outcome == SearchOutcome.COMPLETED

    @property
    def best_count(self) -> int:
        return self.best.word_count if self.best is not None else 0

    def raise_for_outcome(self) -> None:
        """Raise the failure matching ``outcome``; do nothing on success."""
        message = "; ".join(self.messages) or self.outcome.value
        if self.outcome == SearchOutcome.EXHAUSTED:
            raise SearchExhausted(message, result=self)
        if self.outcome == SearchOutcome.CEILING_REACHED:
            raise BacktrackCeilingReached(message, result=self)


class BacktrackingSearch:
    """Seeds the board with the first word and fits the rest by backtracking.

    Words are processed in pool order. For each word every accepted
    ``(location, direction)`` candidate is tried in row-major order, ACROSS
    before DOWN; a failed subtree undoes its placement and moves on. The
    first complete assignment wins. The board's best snapshot is refreshed
    whenever the live word count sets a new high, so an aborted or exhausted
    search still reports its fullest state.
    """

    def __init__(
        self,
        board: Board,
        pool: Union[WordPool, Iterable[str]],
        max_backtracks: int = DEFAULT_MAX_BACKTRACKS,
    ) -> None:
        if max_backtracks < 0:
            raise ConfigurationError(f"Backtrack ceiling cannot be negative: {max_backtracks}")
        self.board = board
        self.pool = pool if isinstance(pool, WordPool) else WordPool(pool)
        self.max_backtracks = max_backtracks
        self.tracker = BestSolutionTracker(board)
        self.state = SearchState.NOT_STARTED

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def run(self) -> SearchResult:
        if self.state != SearchState.NOT_STARTED:
            raise ConfigurationError("A search instance can only run once")
        stats = SearchStats(max_backtracks=self.max_backtracks)

        self.state = SearchState.SEEDING
        self._seed()

        self.state = SearchState.SEARCHING
        LOGGER.info(
            "Searching placements for %d words on %dx%d board",
            len(self.pool),
            self.board.width,
            self.board.height,
        )
        completed = self._place_from(1, stats)

        if completed:
            self.state = SearchState.SUCCEEDED
            outcome = SearchOutcome.COMPLETED
            messages: List[str] = []
        else:
            self.state = SearchState.FAILED
            if stats.aborted:
                outcome = SearchOutcome.CEILING_REACHED
                messages = [f"Backtrack ceiling of {self.max_backtracks} reached"]
            else:
                outcome = SearchOutcome.EXHAUSTED
                messages = [f"No placement left for '{stats.failed_word}'"]

        result = SearchResult(
            outcome=outcome,
            word_count=self.board.word_count,
            total_words=self.board.total_words,
            stats=stats,
            best=self.board.best,
            messages=messages,
        )
        log = LOGGER.info if completed else LOGGER.warning
        log(
            "Search %s: best %d/%d words after %d backtracks",
            outcome.value.lower(),
            result.best_count,
            result.total_words,
            stats.backtracks,
        )
        return result

    def find_placements(self, word: str) -> List[Placement]:
        """Every legal placement for ``word`` in row-major, ACROSS-first order."""
        placements: List[Placement] = []
        rejections: Counter = Counter()
        for location in self.board.locations():
            for direction in (Direction.ACROSS, Direction.DOWN):
                try:
                    self.board.validator.check(location, word, direction)
                except PlacementRejected as exc:
                    rejections[exc.reason.split(" at ")[0]] += 1
                    continue
                placements.append(Placement(start=location, direction=direction))
        if LOGGER.isEnabledFor(logging.DEBUG):
            summary = ", ".join(f"{reason}={count}" for reason, count in rejections.most_common())
            LOGGER.debug("Rejected placements for '%s': %s", word, summary or "none")
        return placements

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------
    def _seed(self) -> None:
        if self.board.word_count:
            raise ConfigurationError("Search needs an empty board")
        first = self.pool[0]
        row = self.board.bounds.top_left.y + self.board.height // 2
        col = self.board.bounds.top_left.x + (self.board.width - len(first)) // 2
        start = Location(col, row)
        try:
            self.board.place_word(start, first, Direction.ACROSS)
        except PlacementError as exc:
            raise ConfigurationError(f"Seed word '{first}' does not fit: {exc}") from exc
        LOGGER.info("Seeded '%s' at (%d,%d) ACROSS", first, start.x, start.y)
        self.tracker.improve()

    # ------------------------------------------------------------------
    # Recursion
    # ------------------------------------------------------------------
    def _place_from(self, index: int, stats: SearchStats) -> bool:
        if index >= len(self.pool):
            self.tracker.capture()
            return True

        word = self.pool[index]
        placements = self.find_placements(word)
        LOGGER.debug("Word #%d '%s' has %d candidate placements", index + 1, word, len(placements))
        if not placements:
            stats.failed_word = word
            return False

        for placement in placements:
            self.board.place_word(placement.start, word, placement.direction)
            stats.placements += 1
            self.tracker.improve()

            if self._place_from(index + 1, stats):
                return True

            self.board.remove_word(placement.start, word, placement.direction)
            stats.record_backtrack()
            if stats.aborted:
                LOGGER.debug("Backtrack ceiling hit while placing '%s'", word)
                return False

        stats.failed_word = word
        return False
