"""
Token count tables.

This module provides the TokenCounts class, a dense table of non-negative
integer counts with one row per vocabulary token and one column per index
(a document, a topic, or any other position). Count-based models such as
collapsed Gibbs samplers repeatedly increment and decrement these cells,
so the table enforces that no cell ever drops below zero: decrementing an
empty cell raises EmptyCountError and leaves the table untouched.

Example:
    >>> from tikka import TokenCounts
    >>>
    >>> counts = TokenCounts.from_documents([
    ...     "the cat sat on the mat",
    ...     "the dog sat",
    ... ])
    >>> counts["the", 0]
    2
    >>> counts.decrement("cat", 1)
    Traceback (most recent call last):
        ...
    tikka.exceptions.EmptyCountError: You are trying to decrement "cat" of index 1, which is an empty cell.
"""

import operator
import threading
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
import scipy.sparse as sp
from sklearn.feature_extraction.text import CountVectorizer

from .exceptions import EmptyCountError, UnknownTokenError

_MAX_COUNT = int(np.iinfo(np.int64).max)


class TokenCounts:
    """
    Non-negative integer counts keyed by (token, index).

    All mutations run under a per-instance lock, so a decrement either
    succeeds and lowers the cell by one, or raises EmptyCountError and
    leaves every cell unchanged.

    Attributes:
        vocabulary: Tokens in row order.
        shape: (number of tokens, number of indices).

    Example:
        >>> counts = TokenCounts(['apple', 'pear'], num_indices=3)
        >>> counts.increment('apple', 2)
        >>> counts.get('apple', 2)
        1
        >>> counts.decrement('apple', 2)
        >>> counts.total()
        0
    """

    def __init__(self, vocabulary: Sequence[str], num_indices: int):
        """
        Create a zero-filled table.

        Args:
            vocabulary: Tokens, one per row. Must be unique.
            num_indices: Number of columns. Must be non-negative.

        Raises:
            ValueError: If the vocabulary has duplicates or num_indices
                        is negative.
        """
        if num_indices < 0:
            raise ValueError(f"num_indices must be non-negative, got {num_indices}")

        self._vocabulary: List[str] = list(vocabulary)
        self._rows: Dict[str, int] = {
            token: row for row, token in enumerate(self._vocabulary)
        }
        if len(self._rows) != len(self._vocabulary):
            raise ValueError("vocabulary contains duplicate tokens")

        self._counts = np.zeros((len(self._vocabulary), num_indices), dtype=np.int64)
        self._lock = threading.Lock()

    @classmethod
    def from_documents(
        cls,
        documents: Iterable[str],
        tokenizer: Optional[Callable[[str], List[str]]] = None,
        lowercase: bool = True,
        **vectorizer_kwargs,
    ) -> "TokenCounts":
        """
        Build a token-by-document table from raw texts.

        Each document becomes one index, in input order. Tokens are
        counted with scikit-learn's CountVectorizer.

        Args:
            documents: Texts to count.
            tokenizer: Optional function splitting a text into tokens.
                      If None, the vectorizer's default word pattern is used.
            lowercase: Whether to lowercase texts before tokenizing.
            **vectorizer_kwargs: Additional arguments passed to CountVectorizer.

        Returns:
            TokenCounts: Table with one row per distinct token.

        Raises:
            ValueError: If the documents contain no tokens.
        """
        if tokenizer is not None:
            vectorizer_kwargs.setdefault('token_pattern', None)
        vectorizer = CountVectorizer(
            tokenizer=tokenizer,
            lowercase=lowercase,
            **vectorizer_kwargs,
        )
        # sparse (documents x tokens), transposed to (tokens x documents)
        matrix = vectorizer.fit_transform(documents).T.toarray()

        vocabulary = vectorizer.get_feature_names_out().tolist()
        table = cls(vocabulary, matrix.shape[1])
        table._counts[:, :] = matrix
        return table

    @property
    def vocabulary(self) -> List[str]:
        return list(self._vocabulary)

    @property
    def shape(self) -> Tuple[int, int]:
        return self._counts.shape

    def __len__(self) -> int:
        return len(self._vocabulary)

    def __contains__(self, token) -> bool:
        return token in self._rows

    def __getitem__(self, key: Tuple[str, int]) -> int:
        token, index = key
        return self.get(token, index)

    def __repr__(self) -> str:
        return f"TokenCounts(tokens={self.shape[0]}, indices={self.shape[1]}, total={self.total()})"

    def _cell(self, token: str, index: int) -> Tuple[int, int]:
        """Resolve (token, index) to a matrix position."""
        try:
            row = self._rows[token]
        except KeyError:
            raise UnknownTokenError(token) from None

        # numpy would wrap negative indices around
        if not 0 <= index < self._counts.shape[1]:
            raise IndexError(
                f"index {index} out of range for {self._counts.shape[1]} indices"
            )
        return row, index

    def get(self, token: str, index: int) -> int:
        """
        Read one cell.

        Raises:
            UnknownTokenError: If the token is not in the vocabulary.
            IndexError: If the index is out of range.
        """
        return int(self._counts[self._cell(token, index)])

    def increment(self, token: str, index: int, amount: int = 1) -> None:
        """
        Add to one cell.

        Args:
            token: Row token.
            index: Column index.
            amount: Non-negative integer amount to add.

        Raises:
            TypeError: If amount is not an integer.
            ValueError: If amount is negative.
            OverflowError: If the cell would exceed the int64 range.
            UnknownTokenError: If the token is not in the vocabulary.
            IndexError: If the index is out of range.
        """
        amount = operator.index(amount)
        if amount < 0:
            raise ValueError(f"amount must be non-negative, got {amount}")
        cell = self._cell(token, index)
        with self._lock:
            if int(self._counts[cell]) + amount > _MAX_COUNT:
                raise OverflowError(
                    f"count for {token!r} at index {index} would exceed {_MAX_COUNT}"
                )
            self._counts[cell] += amount

    def decrement(self, token: str, index: int) -> None:
        """
        Subtract one from a cell.

        The check and the update happen under the table's lock. On failure
        no cell is modified.

        Args:
            token: Row token.
            index: Column index.

        Raises:
            EmptyCountError: If the cell is already zero.
            UnknownTokenError: If the token is not in the vocabulary.
            IndexError: If the index is out of range.
        """
        cell = self._cell(token, index)
        with self._lock:
            if self._counts[cell] <= 0:
                raise EmptyCountError.identified(token, index)
            self._counts[cell] -= 1

    def token_totals(self) -> np.ndarray:
        """Sum of counts per token, in vocabulary order."""
        return self._counts.sum(axis=1)

    def index_totals(self) -> np.ndarray:
        """Sum of counts per index."""
        return self._counts.sum(axis=0)

    def total(self) -> int:
        return int(self._counts.sum())

    def to_array(self) -> np.ndarray:
        """Return a copy of the underlying (tokens x indices) matrix."""
        return self._counts.copy()

    def to_sparse(self) -> sp.csr_matrix:
        """
        Return the counts as a sparse (tokens x indices) CSR matrix.

        Useful for handing the table to scipy or scikit-learn estimators,
        which expect documents as rows: use ``counts.to_sparse().T``.
        """
        return sp.csr_matrix(self._counts)
