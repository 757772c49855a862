"""Crossword generation orchestration.

The search itself works on one fixed board. This module picks the board
size, repeats the search on fresh boards and keeps the fullest attempt:

  1. Sizing: explicit width/height, an estimate from the word lengths, or a
     binary search over square sizes.
  2. Attempts: up to ``max_retries`` runs, later runs reshuffling words of
     equal length so the search explores a different order.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.constants import (DEFAULT_BOARD_SIZE, DEFAULT_MAX_BACKTRACKS,
                              DENSITY_FACTOR, PADDING_FACTOR)
from ..core.exceptions import ConfigurationError, CrosswordError, SearchExhausted
from ..data.pool import WordPool
from ..data.vocabulary import sort_words_by_length
from ..utils.logger import get_logger
from .board import Board
from .search import BacktrackingSearch, SearchResult


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    width: Optional[int] = None
    height: Optional[int] = None
    max_retries: int = 1
    max_backtracks: int = DEFAULT_MAX_BACKTRACKS
    estimate_size: bool = False
    find_optimal_size: bool = False
    seed: Optional[int] = None

    def board_size(self, words: Sequence[str]) -> Tuple[int, int]:
        """Resolve ``(width, height)``; a missing height makes the board square."""
        if self.estimate_size or self.width is None:
            side = estimate_board_size(words)
            return side, side
        height = self.height if self.height is not None else self.width
        return self.width, height


@dataclass
class GenerationResult:
    board: Board
    result: SearchResult
    words: List[str]
    attempts: int = 1

    @property
    def success(self) -> bool:
        return self.result.success

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height


def estimate_board_size(words: Sequence[str]) -> int:
    """Guess a square side length large enough for ``words`` to interlock."""

    if not words:
        return DEFAULT_BOARD_SIZE

    lengths = [len(word) for word in words]
    longest = max(lengths)
    average = sum(lengths) // len(lengths)
    padding = int(max(longest * PADDING_FACTOR, len(words) * PADDING_FACTOR))
    estimated = int(math.sqrt(len(words) * average * DENSITY_FACTOR))
    return max(estimated, longest + padding)


class CrosswordGenerator:
    """High-level orchestrator: sizing, retries and best-attempt selection."""

    def __init__(self, config: GeneratorConfig) -> None:
        if config.max_retries < 1:
            raise ConfigurationError(f"max_retries must be at least 1, got {config.max_retries}")
        self.config = config
        self.rng = random.Random(config.seed)

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def generate(self, words: Sequence[str]) -> GenerationResult:
        ordered = sort_words_by_length(words)
        if not ordered:
            raise ConfigurationError("No words to place")
        if self.config.find_optimal_size:
            return self.find_optimal_size(ordered)
        width, height = self.config.board_size(ordered)
        return self.create_board(ordered, width, height)

    def create_board(self, words: Sequence[str], width: int, height: int) -> GenerationResult:
        """Run up to ``max_retries`` searches on a ``width`` x ``height`` board."""

        best = self._attempt(list(words), width, height, attempt=1)
        attempt = 1
        while not best.success and attempt < self.config.max_retries:
            attempt += 1
            current = self._attempt(self._shuffle_within_lengths(words), width, height, attempt)
            if current.success or current.result.best_count > best.result.best_count:
                best = current

        if not best.success:
            best.attempts = self.config.max_retries
        return best

    def find_optimal_size(self, words: Sequence[str]) -> GenerationResult:
        """Binary search the smallest square board on which every word fits."""

        longest = max(len(word) for word in words)
        low = max(longest, estimate_board_size(words) // 2)
        high = low * 3
        best: Optional[GenerationResult] = None
        while low <= high:
            mid = (low + high) // 2
            LOGGER.info("Trying board size %dx%d", mid, mid)
            try:
                attempt = self.create_board(words, mid, mid)
            except CrosswordError as exc:
                LOGGER.warning("Board size %d rejected: %s", mid, exc)
                low = mid + 1
                continue
            if attempt.success:
                best = attempt
                high = mid - 1
            else:
                low = mid + 1

        if best is None:
            raise SearchExhausted("Could not fit all words on any board size tried")
        LOGGER.info("Smallest board found: %dx%d", best.width, best.height)
        return best

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _attempt(self, order: List[str], width: int, height: int, attempt: int) -> GenerationResult:
        LOGGER.info(
            "Generation attempt %s/%s on %dx%d board",
            attempt,
            self.config.max_retries,
            width,
            height,
        )
        board = Board.from_size(width, height, total_words=len(order))
        search = BacktrackingSearch(board, WordPool(order), self.config.max_backtracks)
        result = search.run()
        if result.success:
            LOGGER.info("Crossword generation completed with %s words", result.word_count)
        else:
            LOGGER.warning(
                "Generation attempt failed: %s",
                "; ".join(result.messages) or result.outcome.value,
            )
        return GenerationResult(board=board, result=result, words=order, attempts=attempt)

    def _shuffle_within_lengths(self, words: Sequence[str]) -> List[str]:
        groups: Dict[int, List[str]] = {}
        for word in words:
            groups.setdefault(len(word), []).append(word)
        shuffled: List[str] = []
        for length in sorted(groups, reverse=True):
            bucket = groups[length]
            self.rng.shuffle(bucket)
            shuffled.extend(bucket)
        return shuffled
