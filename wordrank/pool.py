"""
history and active pool of secret words.

history pins specific day indices to specific words (days already
played or hand-curated). the active pool is what the scheduler rotates
through for every other day. a word must never be in both: a revealed
word still sitting in the pool would let players spoil a future day.
"""

import logging
from dataclasses import dataclass
from typing import Literal, Mapping, Sequence

from .errors import EmptyPoolError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RotationResult:
    """a day's word and where it came from."""

    word: str
    source: Literal["history", "pool"]

    @property
    def is_from_history(self) -> bool:
        return self.source == "history"


class WordPool:
    """immutable history map + de-duplicated active pool."""

    def __init__(self, history: Mapping[int, str], pool: Sequence[str]):
        self._history: dict[int, str] = {int(day): word for day, word in history.items()}

        history_words = set(self._history.values())
        self.removed: list[str] = [w for w in pool if w in history_words]
        self._pool: tuple[str, ...] = tuple(w for w in pool if w not in history_words)

        if self.removed:
            logger.warning(
                "found %d word(s) in both history and pool, removing from pool: %s",
                len(self.removed),
                ", ".join(self.removed),
            )

    def is_in_history(self, day_index: int) -> bool:
        return day_index in self._history

    def word_for_day(self, day_index: int, pool_slot: int) -> RotationResult:
        """
        resolve a day to a word.

        history days ignore pool_slot entirely. other days take
        pool[pool_slot mod len(pool)].
        """
        word = self._history.get(day_index)
        if word is not None:
            return RotationResult(word=word, source="history")

        if not self._pool:
            raise EmptyPoolError(f"no words available in active pool for day {day_index}")

        return RotationResult(word=self._pool[pool_slot % len(self._pool)], source="pool")

    def remaining_pool_count(self) -> int:
        return len(self._pool)

    def history_count(self) -> int:
        return len(self._history)

    def is_word_in_pool(self, word: str) -> bool:
        return word in self._pool

    def snapshot(self) -> tuple[dict[int, str], list[str]]:
        """copies of (history, pool) safe to hand out."""
        return dict(self._history), list(self._pool)
