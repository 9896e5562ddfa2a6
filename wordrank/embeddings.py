"""
game data loader: words, targets and int8 vectors from data_dir.

expected layout:
- words.json: ["word", ...] or {"words": ["word", ...]}
- targets.json: {"history": {"<day index>": "word"}, "pool": ["word", ...]}
- vectors.bin: len(words) * embed_dim signed bytes, row-major, no header

anything missing or malformed raises InitializationError.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import numpy as np
from numpy.typing import NDArray

from .config import Config, DEFAULT_CONFIG
from .errors import InitializationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameData:
    """everything the engine needs, loaded once at startup."""

    words: list[str]

    # curated target list (informational, mirrors the pool as loaded)
    targets: list[str]

    # shape (len(words), embed_dim), int8
    vectors: NDArray[np.int8]

    history: dict[int, str] = field(default_factory=dict)
    pool: list[str] = field(default_factory=list)


def resolve_data_dir(config: Config = DEFAULT_CONFIG) -> Path:
    """
    find the data directory.

    tries config.data_dir first, then ./data and ./src/data.
    """
    candidates = [config.data_dir, Path.cwd() / "data", Path.cwd() / "src" / "data"]
    for path in candidates:
        if path.is_dir():
            if path != config.data_dir:
                logger.info("using alternative data directory: %s", path)
            return path

    tried = ", ".join(str(p) for p in candidates)
    raise InitializationError(f"data directory not found. tried: {tried}")


def _read_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise InitializationError(f"missing data file: {path}") from e
    except json.JSONDecodeError as e:
        raise InitializationError(f"invalid JSON in {path}: {e}") from e


def load_vocab(path: Path) -> list[str]:
    """
    load vocabulary list from words.json.

    returns list where index i → word string.
    """
    data = _read_json(path)
    words = data.get("words") if isinstance(data, dict) else data

    if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
        raise InitializationError(f"{path} must hold a list of strings")
    return words


def load_targets(path: Path) -> tuple[dict[int, str], list[str]]:
    """
    load history map and active pool from targets.json.

    returns:
        (history, pool) with history keyed by int day index
    """
    data = _read_json(path)
    if not isinstance(data, dict):
        raise InitializationError(f"{path} must hold an object with history/pool")

    raw_history = data.get("history") or {}
    pool = data.get("pool") or []

    if not isinstance(raw_history, dict):
        raise InitializationError(f"{path}: history must be an object")
    if not isinstance(pool, list) or not all(isinstance(w, str) for w in pool):
        raise InitializationError(f"{path}: pool must be a list of strings")

    history: dict[int, str] = {}
    for key, word in raw_history.items():
        try:
            day = int(key)
        except (TypeError, ValueError):
            raise InitializationError(f"{path}: history key {key!r} is not a day index") from None
        if day < 0:
            raise InitializationError(f"{path}: history key {key!r} is negative")
        if not isinstance(word, str):
            raise InitializationError(f"{path}: history word for day {day} is not a string")
        history[day] = word

    return history, pool


def load_vectors(path: Path, embed_dim: int = DEFAULT_CONFIG.embed_dim) -> NDArray[np.int8]:
    """
    load raw int8 vectors.

    args:
        path: vectors.bin
        embed_dim: bytes per word

    returns:
        array of shape (rows, embed_dim)
    """
    try:
        flat = np.fromfile(path, dtype=np.int8)
    except FileNotFoundError as e:
        raise InitializationError(f"missing data file: {path}") from e

    if flat.size % embed_dim != 0:
        raise InitializationError(
            f"{path}: {flat.size:,} bytes is not a multiple of embed_dim={embed_dim}"
        )
    return flat.reshape(-1, embed_dim)


def load_game_data(config: Config = DEFAULT_CONFIG) -> GameData:
    """load words, targets and vectors, checking they fit together."""
    data_dir = resolve_data_dir(config)

    words = load_vocab(data_dir / config.words_file)
    history, pool = load_targets(data_dir / config.targets_file)
    vectors = load_vectors(data_dir / config.vectors_file, config.embed_dim)

    if vectors.shape[0] != len(words):
        raise InitializationError(
            f"vectors.bin has {vectors.shape[0]:,} rows but words.json has {len(words):,} words"
        )

    logger.info(
        "loaded %d words, %d pool words, %d history days from %s",
        len(words), len(pool), len(history), data_dir,
    )

    return GameData(
        words=words,
        targets=list(pool),
        vectors=vectors,
        history=history,
        pool=pool,
    )
