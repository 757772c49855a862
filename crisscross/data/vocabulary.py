"""Vocabulary CSV loading and word list preparation."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence

from ..core.exceptions import VocabularyLoadError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

WORD_COLUMN = "word"
HINT_COLUMN = "hint"


@dataclass
class VocabularyConfig:
    """Configuration for reading and cleaning a vocabulary file."""

    path: Path | str
    encoding: str = "utf-8"
    lowercase: bool = False


@dataclass
class VocabularyEntry:
    word: str
    hint: str = ""


def read_vocabulary(config: VocabularyConfig) -> List[VocabularyEntry]:
    """Read ``word,hint`` rows from a CSV file with a header line."""

    source = Path(config.path)
    if not source.exists():
        raise VocabularyLoadError(f"Missing vocabulary CSV: {source}")

    entries: List[VocabularyEntry] = []
    with source.open("r", encoding=config.encoding, newline="") as handle:
        reader = csv.DictReader(handle)
        fieldnames = [name.strip().lower() for name in reader.fieldnames or []]
        if WORD_COLUMN not in fieldnames:
            raise VocabularyLoadError(f"{source} has no '{WORD_COLUMN}' column")
        reader.fieldnames = fieldnames
        has_hint = HINT_COLUMN in fieldnames
        for line_number, row in enumerate(reader, start=2):
            if None in row.values() or None in row:
                raise VocabularyLoadError(
                    f"Malformed row at {source}:{line_number}: expected {len(fieldnames)} fields"
                )
            entries.append(
                VocabularyEntry(
                    word=row[WORD_COLUMN],
                    hint=row[HINT_COLUMN] if has_hint else "",
                )
            )

    LOGGER.info("Loaded %d vocabulary entries from %s", len(entries), source)
    return entries


def clean_words(entries: Iterable[VocabularyEntry], lowercase: bool = False) -> List[str]:
    """Strip whitespace, drop blanks and keep the first of any duplicates."""

    words: List[str] = []
    seen = set()
    for entry in entries:
        word = entry.word.strip()
        if lowercase:
            word = word.lower()
        if not word:
            continue
        if word in seen:
            LOGGER.debug("Skipping duplicate word '%s'", word)
            continue
        seen.add(word)
        words.append(word)
    return words


def sort_words_by_length(words: Sequence[str]) -> List[str]:
    """Longest first, counting characters; ties keep their input order."""
    return sorted(words, key=len, reverse=True)


def load_words(config: VocabularyConfig) -> List[str]:
    """Read, clean and order the words of a vocabulary file for the search."""
    return sort_words_by_length(clean_words(read_vocabulary(config), lowercase=config.lowercase))
