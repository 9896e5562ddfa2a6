"""helpers for using wordfreq to curate the active pool.

future secrets should be words people actually know, so the pool is
built from vocab words with a decent zipf frequency, most common first.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping

from wordfreq import zipf_frequency

from .vocabulary import normalize_word


@dataclass
class ScoredWord:
    word: str
    zipf: float


def score_vocab(
    vocab: Iterable[str],
    *,
    lang: str = "en",
    wordlist: str = "small",
    min_zipf: float = 3.0,
) -> list[ScoredWord]:
    """score each vocab word with its zipf frequency.

    only keeps words with zipf >= min_zipf.
    """
    scored: list[ScoredWord] = []
    for w in vocab:
        z = float(zipf_frequency(w, lang, wordlist=wordlist))
        if z >= min_zipf:
            scored.append(ScoredWord(word=w, zipf=z))
    return scored


def load_blocklist(path: Path | None) -> set[str]:
    """newline-separated words that must never become secrets.

    blank lines and lines starting with # are skipped. a missing file
    means an empty blocklist.
    """
    if path is None or not path.exists():
        return set()

    words: set[str] = set()
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            raw = normalize_word(line)
            if raw and not raw.startswith("#"):
                words.add(raw)
    return words


def build_active_pool(
    vocab: Iterable[str],
    history: Mapping[int, str],
    *,
    lang: str = "en",
    min_zipf: float = 3.0,
    min_length: int = 3,
    blocklist: set[str] | None = None,
) -> list[ScoredWord]:
    """pick pool candidates from the vocabulary.

    drops history words, blocked words and anything that isn't an
    alphabetic word of at least min_length characters. sorted by
    descending zipf, ties alphabetical.
    """
    excluded = set(history.values()) | (blocklist or set())
    eligible = [
        w for w in vocab
        if len(w) >= min_length and w.isalpha() and w not in excluded
    ]
    scored = score_vocab(eligible, lang=lang, min_zipf=min_zipf)
    scored.sort(key=lambda s: (-s.zipf, s.word))
    return scored
