"""Custom exception hierarchy for crossword filling."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..engine.search import SearchResult


class CrosswordError(Exception):
    """Base exception for filler failures."""


class ConfigurationError(CrosswordError):
    """Raised when a board or word pool cannot start a search."""


class VocabularyLoadError(CrosswordError):
    """Raised when the vocabulary CSV cannot be parsed."""


class BoardStoreError(CrosswordError):
    """Raised when a stored board document cannot be decoded."""


class PlacementError(CrosswordError):
    """Raised when a mutation would leave the board inconsistent."""


class PlacementRejected(CrosswordError):
    """Raised by the validator when a placement breaks an adjacency rule."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class SearchFailed(CrosswordError):
    """Base for search outcomes that did not place every word."""

    def __init__(self, message: str, result: Optional["SearchResult"] = None) -> None:
        super().__init__(message)
        self.result = result


class SearchExhausted(SearchFailed):
    """Raised when no assignment of all words fits on the board."""


class BacktrackCeilingReached(SearchFailed):
    """Raised when the search stopped after too many undo operations."""
