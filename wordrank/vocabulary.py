"""
in-memory vocabulary and quantized embedding matrix.

built once at startup and read-only afterwards, so it can be shared
between threads without locking.
"""

import numpy as np
from numpy.typing import NDArray

from .errors import InitializationError

# typographic apostrophe, modifier letter apostrophe, grave accent
_APOSTROPHES = str.maketrans({"’": "'", "ʼ": "'", "`": "'"})


def normalize_word(word: str) -> str:
    """trim, lowercase, and fold apostrophe look-alikes to ascii '."""
    return word.strip().lower().translate(_APOSTROPHES)


def compute_norms(vectors: NDArray[np.int8]) -> NDArray[np.float32]:
    """
    euclidean norm of every row.

    sums of squares are exact integers, the sqrt is taken in float64 and stored as float32.
    """
    sum_sq = np.einsum("ij,ij->i", vectors, vectors, dtype=np.int64)
    return np.sqrt(sum_sq.astype(np.float64)).astype(np.float32)


class VocabularyStore:
    """
    word list, lookup index, int8 vectors and cached norms.

    args:
        words: vocabulary, index i -> word
        vectors: int8 matrix of shape (len(words), dim)

    raises:
        InitializationError: if the matrix doesn't line up with the words
    """

    def __init__(self, words: list[str], vectors: NDArray[np.int8]):
        vectors = np.asarray(vectors).view()
        if vectors.dtype != np.int8:
            raise InitializationError(f"embedding matrix must be int8, got {vectors.dtype}")
        if vectors.ndim != 2:
            raise InitializationError(f"embedding matrix must be 2-D, got shape {vectors.shape}")
        if vectors.shape[0] != len(words):
            raise InitializationError(
                f"embedding rows ({vectors.shape[0]:,}) != vocabulary size ({len(words):,})"
            )

        self._words: tuple[str, ...] = tuple(words)
        self._vectors = vectors
        self._vectors.setflags(write=False)
        self._norms = compute_norms(vectors)
        self._norms.setflags(write=False)
        self._index: dict[str, int] = {normalize_word(w): i for i, w in enumerate(self._words)}

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    @property
    def vectors(self) -> NDArray[np.int8]:
        return self._vectors

    @property
    def norms(self) -> NDArray[np.float32]:
        return self._norms

    @property
    def dim(self) -> int:
        return self._vectors.shape[1]

    def size(self) -> int:
        return len(self._words)

    def index_of(self, word: str) -> int | None:
        """vocabulary index of word (normalized first), None if unknown."""
        return self._index.get(normalize_word(word))

    def word_at(self, index: int) -> str:
        return self._words[index]

    def vector_of(self, index: int) -> NDArray[np.int8]:
        return self._vectors[index]

    def norm_of(self, index: int) -> float:
        return float(self._norms[index])

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return self.index_of(word) is not None
