"""Read-only, length-bucketed view over the words to place."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, Iterator, List, Tuple

from ..core.exceptions import ConfigurationError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class WordPool:
    """Holds the ordered word sequence, a length index and a membership set.

    Lengths are counted in characters, so ``"über"`` lands in the 4 bucket.
    The pool is never consumed: the search walks it by index.
    """

    def __init__(self, words: Iterable[str]) -> None:
        ordered: List[str] = []
        by_length: Dict[int, List[str]] = defaultdict(list)
        seen: set = set()
        for word in words:
            if not word:
                raise ConfigurationError("Word pool cannot contain empty words")
            if word in seen:
                LOGGER.warning("Duplicate word '%s' in pool", word)
            ordered.append(word)
            by_length[len(word)].append(word)
            seen.add(word)
        if not ordered:
            raise ConfigurationError("Word pool needs at least one word")

        self._words: Tuple[str, ...] = tuple(ordered)
        self._by_length: Dict[int, Tuple[str, ...]] = {
            length: tuple(bucket) for length, bucket in by_length.items()
        }
        self._word_set: FrozenSet[str] = frozenset(seen)
        LOGGER.debug(
            "Loaded %d words into pool (%d distinct lengths)",
            len(self._words),
            len(self._by_length),
        )

    @classmethod
    def load(cls, words: Iterable[str]) -> "WordPool":
        return cls(words)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def lengths(self) -> List[int]:
        return sorted(self._by_length)

    def words_of_length(self, length: int) -> Tuple[str, ...]:
        return self._by_length.get(length, ())

    def exists(self, word: str) -> bool:
        return word in self._word_set

    def __contains__(self, word: object) -> bool:
        return word in self._word_set

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __getitem__(self, index: int) -> str:
        return self._words[index]
