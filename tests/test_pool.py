import logging

import pytest

from wordrank.errors import EmptyPoolError
from wordrank.pool import WordPool


def test_overlap_is_removed_from_pool_with_warning(caplog):
    caplog.set_level(logging.WARNING, logger="wordrank.pool")

    pool = WordPool({0: "d", 1: "x"}, ["a", "d", "b", "x"])

    assert pool.removed == ["d", "x"]
    assert pool.remaining_pool_count() == 2
    assert not pool.is_word_in_pool("d")
    assert "2 word(s)" in caplog.text
    assert "d, x" in caplog.text


def test_no_warning_without_overlap(caplog):
    caplog.set_level(logging.WARNING, logger="wordrank.pool")
    WordPool({0: "d"}, ["a", "b"])
    assert caplog.records == []


def test_no_word_in_both_history_and_pool():
    pool = WordPool({0: "d", 5: "a"}, ["a", "b", "c", "d", "e"])
    history, words = pool.snapshot()
    assert not set(history.values()) & set(words)


def test_history_day_ignores_slot():
    pool = WordPool({0: "d"}, ["a", "b", "c", "e"])
    for slot in (0, 1, 7, 1000):
        result = pool.word_for_day(0, slot)
        assert result.word == "d"
        assert result.source == "history"
        assert result.is_from_history


def test_pool_day_wraps_slot():
    pool = WordPool({0: "d"}, ["a", "b", "c", "e"])
    result = pool.word_for_day(3, 6)
    assert result.word == "c"
    assert result.source == "pool"
    assert not result.is_from_history


def test_empty_pool_fails_only_for_pool_days():
    pool = WordPool({0: "d"}, [])
    assert pool.word_for_day(0, 0).word == "d"
    with pytest.raises(EmptyPoolError):
        pool.word_for_day(1, 0)
    # still usable afterwards
    assert pool.word_for_day(0, 0).word == "d"


def test_counts_and_history_lookup():
    pool = WordPool({"0": "d", "3": "e"}, ["a", "b"])
    assert pool.history_count() == 2
    assert pool.remaining_pool_count() == 2
    assert pool.is_in_history(3)
    assert not pool.is_in_history(1)


def test_snapshot_is_a_copy():
    pool = WordPool({0: "d"}, ["a", "b"])
    history, words = pool.snapshot()
    history[1] = "zzz"
    words.append("zzz")
    assert not pool.is_in_history(1)
    assert pool.remaining_pool_count() == 2
