"""
Corpus-wide term statistics consumed by the BM25 scorer.

CorpusStatistics accumulates documents one at a time, then derives IDF:
    idf(t) = log(N / df(t))
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from typing import Protocol

import numpy as np

logger = logging.getLogger(__name__)


class StatisticsError(ValueError):
    """Raised when corpus statistics cannot support scoring."""


class StatisticsProtocol(Protocol):
    """Read-only view of corpus statistics required by the scorer."""

    term_frequency: Mapping[int, float]
    inverse_document_frequency: Mapping[int, float]
    total_corpus_length: int
    document_count: int


class CorpusStatistics:
    """
    Term statistics for a collection of documents of term ids.

    Attributes:
        term_frequency (Counter[int]): Occurrences of each term across the whole corpus.
        document_frequency (Counter[int]): Number of documents each term appears in.
        total_corpus_length (int): Sum of the lengths of all added documents.
        document_count (int): Number of added documents.
    """

    def __init__(self):
        self.term_frequency: Counter[int] = Counter()
        self.document_frequency: Counter[int] = Counter()
        self.total_corpus_length = 0
        self.document_count = 0
        self._idf: dict[int, float] | None = None

    def __len__(self) -> int:
        return self.document_count

    def __contains__(self, term_id: object) -> bool:
        return term_id in self.term_frequency

    @classmethod
    def from_documents(cls, documents: Iterable[Sequence[int]]) -> "CorpusStatistics":
        stats = cls()
        for document in documents:
            stats.add(document)
        return stats.calculate_idf()

    def add(self, document: Sequence[int]) -> None:
        """Adds one document. Previously computed IDF values are discarded."""
        self.term_frequency.update(document)
        self.document_frequency.update(set(document))
        self.total_corpus_length += len(document)
        self.document_count += 1
        self._idf = None

    def calculate_idf(self) -> "CorpusStatistics":
        if self.document_count == 0:
            raise StatisticsError("Cannot compute IDF for an empty corpus.")
        terms = list(self.document_frequency.keys())
        df = np.array([self.document_frequency[t] for t in terms], dtype=np.float64)
        idf = np.log(self.document_count / df)
        self._idf = {t: float(v) for t, v in zip(terms, idf)}
        logger.debug(
            "Computed IDF for %d terms over %d documents", len(terms), self.document_count
        )
        return self

    @property
    def inverse_document_frequency(self) -> dict[int, float]:
        if self._idf is None:
            raise StatisticsError("IDF has not been calculated; call calculate_idf() first.")
        return self._idf

    @property
    def average_document_length(self) -> float:
        return average_document_length(self)


def average_document_length(stats: StatisticsProtocol) -> float:
    """total_corpus_length / document_count, rejecting empty statistics."""
    if stats.document_count <= 0:
        raise StatisticsError(
            f"document_count must be positive, got {stats.document_count}."
        )
    return stats.total_corpus_length / stats.document_count
