"""
compute the full ranking of the vocabulary against a secret word.

score for word i is dot(v_i, v_secret) / |v_i|. the secret's own norm
is left out on purpose: it's the same for every word, so it never
changes the order, and leaving it out keeps ranks reproducible.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass
class RankingResult:
    """results from compute_rankings."""

    # vocabulary indices, most similar first (order[0] is normally the secret)
    order: NDArray[np.int64]

    # full rank array: rank[i] = position of word i (1 = closest to secret)
    rank: NDArray[np.uint32]

    # raw scores per vocabulary index
    scores: NDArray[np.float32]

    # the secret word's index
    secret_id: int

    def __len__(self) -> int:
        return len(self.order)


def compute_scores(
    vectors: NDArray[np.int8],
    norms: NDArray[np.float32],
    secret_id: int,
) -> NDArray[np.float32]:
    """
    dot(v_i, v_secret) / norm_i for every word, 0 where norm_i == 0.

    int8 products summed over 384 dims stay below 2^24, so the float32
    matmul is exact. the division happens in float64 and is rounded
    to float32 once.
    """
    matrix = vectors.astype(np.float32)
    dots = (matrix @ matrix[secret_id]).astype(np.float64)

    norms64 = norms.astype(np.float64)
    scores = np.zeros(len(norms), dtype=np.float64)
    np.divide(dots, norms64, out=scores, where=norms64 > 0)
    return scores.astype(np.float32)


def compute_rankings(
    vectors: NDArray[np.int8],
    norms: NDArray[np.float32],
    secret_id: int,
) -> RankingResult:
    """
    compute full rankings for a secret.

    args:
        vectors: int8 embeddings, shape (V, D)
        norms: per-row norms, shape (V,)
        secret_id: index of the secret word

    returns:
        RankingResult with order, rank array and scores
    """
    V = vectors.shape[0]
    scores = compute_scores(vectors, norms, secret_id)

    # stable sort on the negated scores: descending, ties by index ascending
    order = np.argsort(-scores, kind="stable").astype(np.int64)

    rank = np.empty(V, dtype=np.uint32)
    rank[order] = np.arange(1, V + 1, dtype=np.uint32)

    return RankingResult(order=order, rank=rank, scores=scores, secret_id=secret_id)
