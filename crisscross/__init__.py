"""Crossword filler that interlocks a word list on a bounded grid.

This package exposes the public API surface via:

- ``crisscross.engine.board.Board``: cell grid plus place/remove mutators.
- ``crisscross.engine.search.BacktrackingSearch``: fits a word pool onto a board.
- ``crisscross.engine.generator.CrosswordGenerator``: sizing and retry wrapper.
- ``crisscross.data.vocabulary`` helpers: CSV word list loading.
"""

from .engine.board import Board, BoardSnapshot
from .engine.generator import CrosswordGenerator, GeneratorConfig
from .engine.search import BacktrackingSearch, SearchOutcome, SearchResult
from .data.pool import WordPool
from .data.vocabulary import VocabularyConfig, load_words

__all__ = [
    "Board",
    "BoardSnapshot",
    "BacktrackingSearch",
    "SearchOutcome",
    "SearchResult",
    "CrosswordGenerator",
    "GeneratorConfig",
    "WordPool",
    "VocabularyConfig",
    "load_words",
]

__version__ = "0.1.0"
