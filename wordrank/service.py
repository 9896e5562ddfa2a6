"""
game service: the query surface used by the transport layer.

wires the data source, scheduler and ranking engine together. every
query takes an explicit day index (or falls back to today), which keeps
the service usable for past days and easy to test with a fixed clock.
"""

import logging
import math
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import partial
from typing import Callable, Iterable

from .config import Config, DEFAULT_CONFIG
from .embeddings import GameData, load_game_data
from .engine import GuessResult, RankingEngine, TopWord
from .errors import NotInitializedError
from .pool import WordPool
from .vocabulary import VocabularyStore, normalize_word
from .word_of_day import DailyScheduler, day_index_for

logger = logging.getLogger(__name__)

# hints never search past this rank
MAX_HINT_RANK = 100_000


@dataclass(frozen=True)
class GameState:
    day_index: int
    secret_word: str


@dataclass(frozen=True)
class Hint:
    word: str
    rank: int


def hint_rank(best_rank: int, used_ranks: Iterable[int] = ()) -> int:
    """
    pick the rank to reveal as a hint.

    starts at half the player's best rank and walks down the list past
    anything already revealed. rank 1 is never handed out.
    """
    if best_rank < 1:
        raise ValueError(f"best_rank must be >= 1, got {best_rank}")

    used = set(used_ranks)
    used.add(1)

    target = max(1, math.ceil(best_rank / 2))
    while target in used and target <= MAX_HINT_RANK:
        target += 1
    return target


class GameService:
    """
    query surface over the ranking & scheduling engine.

    args:
        loader: returns GameData; defaults to reading config.data_dir
        config: engine config
        clock: returns "now"; defaults to the current UTC time
    """

    def __init__(
        self,
        loader: Callable[[], GameData] | None = None,
        config: Config = DEFAULT_CONFIG,
        clock: Callable[[], datetime] | None = None,
    ):
        self.config = config
        self._loader = loader or partial(load_game_data, config)
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._init_lock = threading.Lock()

        self._store: VocabularyStore | None = None
        self._pool: WordPool | None = None
        self._scheduler: DailyScheduler | None = None
        self._engine: RankingEngine | None = None
        self._targets: list[str] = []

    # --- lifecycle ---

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    def initialize(self) -> None:
        """load data and build the engine. safe to call more than once."""
        with self._init_lock:
            if self.is_initialized:
                return
            try:
                data = self._loader()
                store = VocabularyStore(data.words, data.vectors)
                pool = WordPool(data.history, data.pool)
                scheduler = DailyScheduler(pool, self.config)
            except Exception:
                logger.exception("failed to initialize game service")
                raise

            self._store = store
            self._pool = pool
            self._scheduler = scheduler
            self._targets = list(data.targets)
            self._engine = RankingEngine(store, self.config.ranking_cache_size)
            logger.info(
                "game service ready: %d words, %d pool, %d history",
                store.size(), pool.remaining_pool_count(), pool.history_count(),
            )

    def _require_ready(self) -> tuple[DailyScheduler, RankingEngine]:
        if self._engine is None or self._scheduler is None:
            raise NotInitializedError(
                "GameService must be initialized before use, call initialize() first"
            )
        return self._scheduler, self._engine

    # --- queries ---

    @property
    def store(self) -> VocabularyStore:
        self._require_ready()
        return self._store

    @property
    def pool(self) -> WordPool:
        self._require_ready()
        return self._pool

    @property
    def scheduler(self) -> DailyScheduler:
        return self._require_ready()[0]

    @property
    def targets(self) -> list[str]:
        self._require_ready()
        return list(self._targets)

    def current_day_index(self) -> int:
        return day_index_for(self._clock(), self.config.epoch)

    def _resolve_day(self, day_index: int | None) -> int:
        return self.current_day_index() if day_index is None else day_index

    def get_target_word(self, day_index: int) -> str:
        scheduler, _ = self._require_ready()
        return scheduler.secret_for_day(day_index).word

    def get_daily_secret(self) -> GameState:
        self._require_ready()
        day_index = self.current_day_index()
        return GameState(day_index=day_index, secret_word=self.get_target_word(day_index))

    def make_guess(self, word: str, day_index: int | None = None) -> GuessResult:
        scheduler, engine = self._require_ready()
        day = self._resolve_day(day_index)

        # unknown words never need the secret
        if word not in self._store:
            return GuessResult.unknown(normalize_word(word))

        secret = scheduler.secret_for_day(day).word
        return engine.guess(word, secret, day)

    def get_word_by_rank(self, rank: int, day_index: int | None = None) -> str:
        scheduler, engine = self._require_ready()
        day = self._resolve_day(day_index)
        return engine.word_at_rank(rank, scheduler.secret_for_day(day).word, day)

    def get_top_words(self, day_index: int, count: int | None = None) -> list[TopWord]:
        scheduler, engine = self._require_ready()
        if count is None:
            count = self.config.default_top_count
        return engine.top_words(scheduler.secret_for_day(day_index).word, day_index, count)

    def get_hint(
        self,
        best_rank: int,
        used_ranks: Iterable[int] = (),
        day_index: int | None = None,
    ) -> Hint:
        """reveal the word at hint_rank(best_rank, used_ranks)."""
        self._require_ready()
        rank = hint_rank(best_rank, used_ranks)
        return Hint(word=self.get_word_by_rank(rank, day_index), rank=rank)
