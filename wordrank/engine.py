"""
similarity ranking engine with a small per-day cache.

a full ranking costs V x D multiply-adds, so it's computed once per day
index and shared. the cache holds at most two days (today plus one
neighbour) and makes sure concurrent requests for the same uncached day
wait for a single computation instead of racing.
"""

import logging
import threading
import time
from collections import OrderedDict
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Callable

from .errors import DataInconsistencyError
from .rankings import RankingResult, compute_rankings
from .vocabulary import VocabularyStore, normalize_word

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuessResult:
    """outcome of scoring a guess."""

    word: str

    # 1 = secret, -1 = unknown word
    rank: int

    # cosine similarity to the secret, 0.0 for unknown words
    similarity: float

    is_unknown: bool

    @classmethod
    def unknown(cls, word: str) -> "GuessResult":
        return cls(word=word, rank=-1, similarity=0.0, is_unknown=True)


@dataclass(frozen=True)
class TopWord:
    rank: int
    word: str


class RankingCache:
    """
    day index -> RankingResult, bounded, with at most one computation
    in flight per day.
    """

    def __init__(self, capacity: int = 2):
        if capacity < 1:
            raise ValueError(f"cache capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._entries: OrderedDict[int, RankingResult] = OrderedDict()
        self._pending: dict[int, Future] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, day_index: int) -> bool:
        with self._lock:
            return day_index in self._entries

    def keys(self) -> list[int]:
        """cached day indices, least recently touched first."""
        with self._lock:
            return list(self._entries)

    def get_or_compute(
        self,
        day_index: int,
        compute: Callable[[], RankingResult],
    ) -> RankingResult:
        """
        return the cached ranking for day_index, computing it if needed.

        callers that arrive while another thread computes the same day
        block on that computation's future. a failed computation is not
        cached; its exception propagates to every waiting caller.
        """
        with self._lock:
            cached = self._entries.get(day_index)
            if cached is not None:
                self._entries.move_to_end(day_index)
                return cached

            future = self._pending.get(day_index)
            owner = future is None
            if owner:
                future = Future()
                self._pending[day_index] = future

        if not owner:
            return future.result()

        try:
            result = compute()
        except BaseException as exc:
            with self._lock:
                del self._pending[day_index]
            future.set_exception(exc)
            raise

        with self._lock:
            self._entries[day_index] = result
            self._entries.move_to_end(day_index)
            while len(self._entries) > self.capacity:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("evicted ranking for day %d", evicted)
            del self._pending[day_index]

        future.set_result(result)
        return result

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


class RankingEngine:
    """answers guess -> rank and rank -> word against a day's secret."""

    def __init__(self, store: VocabularyStore, cache_size: int = 2):
        self.store = store
        self.cache = RankingCache(cache_size)

    def _secret_id(self, secret_word: str) -> int:
        secret_id = self.store.index_of(secret_word)
        if secret_id is None:
            logger.error(
                "secret word %r (normalized: %r) not found in vocabulary",
                secret_word, normalize_word(secret_word),
            )
            raise DataInconsistencyError(f"secret word {secret_word!r} not found in vocabulary")
        return secret_id

    def rankings_for(self, secret_word: str, day_index: int) -> RankingResult:
        """full ranking against secret_word, cached under day_index."""

        def compute() -> RankingResult:
            secret_id = self._secret_id(secret_word)
            started = time.perf_counter()
            result = compute_rankings(self.store.vectors, self.store.norms, secret_id)
            logger.debug(
                "ranked %d words for day %d in %.1f ms",
                len(result), day_index, (time.perf_counter() - started) * 1000,
            )
            return result

        return self.cache.get_or_compute(day_index, compute)

    def guess(self, word: str, secret_word: str, day_index: int) -> GuessResult:
        """
        score a guess.

        unknown words come back with rank -1 rather than raising. the
        secret itself is answered without looking at the ranking.
        """
        clean = normalize_word(word)
        word_id = self.store.index_of(clean)
        if word_id is None:
            return GuessResult.unknown(clean)

        if clean == normalize_word(secret_word):
            return GuessResult(word=clean, rank=1, similarity=1.0, is_unknown=False)

        ranking = self.rankings_for(secret_word, day_index)
        secret_norm = self.store.norm_of(ranking.secret_id)
        score = float(ranking.scores[word_id])
        similarity = score / secret_norm if secret_norm > 0 else 0.0

        return GuessResult(
            word=clean,
            rank=int(ranking.rank[word_id]),
            similarity=similarity,
            is_unknown=False,
        )

    def word_at_rank(self, rank: int, secret_word: str, day_index: int) -> str:
        """word at a 1-based rank; out-of-range ranks stick to the ends."""
        ranking = self.rankings_for(secret_word, day_index)
        position = max(0, min(rank - 1, len(ranking) - 1))
        return self.store.word_at(int(ranking.order[position]))

    def top_words(self, secret_word: str, day_index: int, count: int) -> list[TopWord]:
        """first count entries of the ranking, rank 1 first."""
        ranking = self.rankings_for(secret_word, day_index)
        return [
            TopWord(rank=i + 1, word=self.store.word_at(int(idx)))
            for i, idx in enumerate(ranking.order[: max(count, 0)])
        ]
