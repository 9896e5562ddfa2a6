"""
wordrank: ranking & scheduling engine for a daily semantic word game

picks each day's secret word from a curated pool without repeats or
guessable patterns, and ranks every vocabulary word by embedding
similarity to that secret.
"""

from .config import Config, DEFAULT_CONFIG
from .embeddings import GameData, load_game_data
from .engine import GuessResult, RankingCache, RankingEngine, TopWord
from .errors import (
    DataInconsistencyError,
    EmptyPoolError,
    InitializationError,
    NoValidParametersError,
    NotInitializedError,
    WordRankError,
)
from .lcg import LCGParams, find_optimal_lcg_params
from .pool import RotationResult, WordPool
from .rankings import RankingResult, compute_rankings
from .service import GameService, GameState, Hint, hint_rank
from .vocabulary import VocabularyStore, normalize_word
from .word_of_day import DailyScheduler, day_index_for, is_playable_day

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "GameData",
    "load_game_data",
    "GuessResult",
    "RankingCache",
    "RankingEngine",
    "TopWord",
    "DataInconsistencyError",
    "EmptyPoolError",
    "InitializationError",
    "NoValidParametersError",
    "NotInitializedError",
    "WordRankError",
    "LCGParams",
    "find_optimal_lcg_params",
    "RotationResult",
    "WordPool",
    "RankingResult",
    "compute_rankings",
    "GameService",
    "GameState",
    "Hint",
    "hint_rank",
    "VocabularyStore",
    "normalize_word",
    "DailyScheduler",
    "day_index_for",
    "is_playable_day",
]
