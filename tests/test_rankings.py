import math

import numpy as np
import pytest

from conftest import VECTORS
from wordrank.rankings import compute_rankings, compute_scores
from wordrank.vocabulary import compute_norms


def test_order_against_a():
    result = compute_rankings(VECTORS, compute_norms(VECTORS), 0)
    # c and d both score 0: lower index first
    assert result.order.tolist() == [0, 1, 2, 3, 4]
    assert result.rank.tolist() == [1, 2, 3, 4, 5]
    assert result.secret_id == 0
    assert len(result) == 5


def test_order_against_c():
    result = compute_rankings(VECTORS, compute_norms(VECTORS), 2)
    # c=10, b=6, then a, d, e tied at 0
    assert result.order.tolist() == [2, 1, 0, 3, 4]
    assert result.rank.tolist() == [3, 2, 1, 4, 5]


def test_score_is_not_divided_by_secret_norm():
    vectors = np.array([[20, 0], [10, 10]], dtype=np.int8)
    scores = compute_scores(vectors, compute_norms(vectors), 0)
    # dot / |v_i| only
    assert scores[0] == pytest.approx(20.0)
    assert scores[1] == pytest.approx(200 / math.sqrt(200))


def test_zero_norm_word_scores_zero():
    vectors = np.array([[5, 5], [0, 0], [-5, -5]], dtype=np.int8)
    result = compute_rankings(vectors, compute_norms(vectors), 0)
    assert result.scores[1] == 0.0
    assert result.order.tolist() == [0, 1, 2]


def test_rank_is_inverse_of_order():
    rng = np.random.default_rng(7)
    vectors = rng.integers(-128, 128, size=(300, 16), dtype=np.int8)
    result = compute_rankings(vectors, compute_norms(vectors), 11)
    for position, idx in enumerate(result.order):
        assert result.rank[idx] == position + 1


def test_matches_reference_scoring_bit_for_bit():
    rng = np.random.default_rng(1234)
    vectors = rng.integers(-128, 128, size=(200, 384), dtype=np.int8)
    # a duplicate row forces an exact tie
    vectors[150] = vectors[40]
    secret_id = 17
    norms = compute_norms(vectors)

    secret = [int(x) for x in vectors[secret_id]]
    expected_scores = []
    for row in vectors:
        values = [int(x) for x in row]
        dot = sum(v * s for v, s in zip(values, secret))
        norm = np.float32(math.sqrt(sum(v * v for v in values)))
        expected_scores.append(np.float32(dot / float(norm)) if norm > 0 else np.float32(0))

    expected_order = sorted(range(len(vectors)), key=lambda i: -expected_scores[i])

    result = compute_rankings(vectors, norms, secret_id)
    np.testing.assert_array_equal(result.scores, np.array(expected_scores, dtype=np.float32))
    assert result.order.tolist() == expected_order
    assert result.order[0] == secret_id
    assert result.rank[40] + 1 == result.rank[150]
