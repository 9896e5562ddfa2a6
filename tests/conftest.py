import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from wordrank import Config, GameData, GameService, VocabularyStore

EPOCH = datetime(2026, 1, 15, tzinfo=timezone.utc)

WORDS = ["a", "b", "c", "d", "e"]

# 4-dim toy embeddings:
#   vs "a": a=10, b=8, c=0, d=0, e=-10
#   vs "c": c=10, b=6, a=0, d=0, e=0
VECTORS = np.array(
    [
        [10, 0, 0, 0],
        [8, 6, 0, 0],
        [0, 10, 0, 0],
        [0, 0, 10, 0],
        [-10, 0, 0, 0],
    ],
    dtype=np.int8,
)


def make_game_data(history=None, pool=None, words=None, vectors=None) -> GameData:
    pool = list(WORDS[:3] + WORDS[4:]) if pool is None else pool
    return GameData(
        words=list(WORDS if words is None else words),
        targets=list(pool),
        vectors=VECTORS if vectors is None else vectors,
        history={0: "d"} if history is None else history,
        pool=pool,
    )


def fixed_clock(day_index: int):
    moment = EPOCH + timedelta(days=day_index, hours=13)
    return lambda: moment


@pytest.fixture
def toy_config():
    return Config(embed_dim=4)


@pytest.fixture
def toy_store():
    return VocabularyStore(WORDS, VECTORS)


@pytest.fixture
def toy_service(toy_config):
    """initialized service over the toy data, clock fixed on day 2."""
    service = GameService(loader=make_game_data, config=toy_config, clock=fixed_clock(2))
    service.initialize()
    return service
