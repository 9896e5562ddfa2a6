"""
deterministic secret word selection based on day index.

historical days come straight from the history map. every other day
goes through an LCG permutation of the active pool, so the same day
always gives the same word and no word repeats within len(pool) days.
"""

import logging
from datetime import datetime, timedelta, timezone

from .config import Config, DEFAULT_CONFIG
from .lcg import LCGParams, find_optimal_lcg_params
from .pool import RotationResult, WordPool

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


def day_index_for(moment: datetime, epoch: datetime = DEFAULT_CONFIG.epoch) -> int:
    """
    floor((moment - epoch) / one day).

    naive datetimes are taken to be UTC. days before the epoch are negative.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    if epoch.tzinfo is None:
        epoch = epoch.replace(tzinfo=timezone.utc)
    return (moment - epoch) // ONE_DAY


def is_playable_day(day_index: int | None, current_day_index: int) -> bool:
    """
    True if a requested day may be served: omitted (means today) or
    between day 0 and today. future days are never playable.
    """
    return day_index is None or 0 <= day_index <= current_day_index


class DailyScheduler:
    """maps a day index to exactly one secret word."""

    def __init__(self, pool: WordPool, config: Config = DEFAULT_CONFIG):
        self.pool = pool
        self._params: LCGParams | None = None

        n = pool.remaining_pool_count()
        if n >= 2:
            self._params = find_optimal_lcg_params(
                n,
                increment_limit=config.lcg_increment_limit,
                search_limit=config.lcg_search_limit,
                max_candidates=config.lcg_max_candidates,
            )
            logger.info(
                "lcg parameters for active pool: n=%d a=%d b=%d",
                self._params.n, self._params.a, self._params.b,
            )

    @property
    def params(self) -> LCGParams | None:
        """None when the pool has fewer than two words."""
        return self._params

    def pool_slot(self, day_index: int) -> int:
        if self._params is None:
            return 0
        return self._params.slot(day_index)

    def secret_for_day(self, day_index: int) -> RotationResult:
        # history needs no obfuscation
        if self.pool.is_in_history(day_index):
            return self.pool.word_for_day(day_index, 0)

        return self.pool.word_for_day(day_index, self.pool_slot(day_index))
