"""
BM25 scoring over precomputed corpus statistics.

For every document d and every term t shared by the query and d:

    score(t, d) = idf(t) * tf(t) * (k1 + 1) / (tf(t) + k1 * (1 - b + b * |d| / avgdl))

where tf is the corpus-scoped term frequency weight, |d| is the number of term
occurrences in d and avgdl = total_corpus_length / document_count. A document
scores the sum over the distinct shared terms.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import NamedTuple

import numpy as np

from ranking_bm25.ranking_utils import rank
from ranking_bm25.statistics import StatisticsError, StatisticsProtocol, average_document_length
from ranking_bm25.vocabulary import bag_of_words

logger = logging.getLogger(__name__)

DEFAULT_K1 = 1.5
DEFAULT_B = 0.75

__all__ = ["DEFAULT_B", "DEFAULT_K1", "BM25", "DocScore", "StatisticsError", "bm25", "common_terms"]


class DocScore(NamedTuple):
    """Score of the document at position ``id`` of the scored list."""

    id: int
    score: float


def common_terms(
    query_terms: set[int], document: Sequence[int], stats: StatisticsProtocol
) -> list[int]:
    """
    Distinct term ids present in both the query and the document.

    Terms missing from either statistics mapping are left out, so they add
    nothing to the score.
    """
    shared = query_terms.intersection(document)
    return bag_of_words(
        t
        for t in shared
        if t in stats.term_frequency and t in stats.inverse_document_frequency
    )


def bm25(
    stats: StatisticsProtocol,
    query: Sequence[int],
    documents: Sequence[Sequence[int]],
    k1: float = DEFAULT_K1,
    b: float = DEFAULT_B,
) -> list[DocScore]:
    """
    Scores every document against the query.

    Args:
        stats: Corpus statistics sharing the term-id space of query and documents.
        query: Query term ids.
        documents: Candidate documents as term-id sequences.
        k1: Term frequency saturation, usually between 1.2 and 2.0.
        b: Length normalization strength, usually around 0.75.

    Returns:
        One DocScore per document, in input order.

    Raises:
        StatisticsError: If ``stats.document_count`` is not positive.
    """
    avg_len = average_document_length(stats)
    query_terms = set(query)
    tf_map = stats.term_frequency
    idf_map = stats.inverse_document_frequency

    results: list[DocScore] = []
    for index, document in enumerate(documents):
        terms = common_terms(query_terms, document, stats)
        if not terms:
            results.append(DocScore(index, 0.0))
            continue

        tf = np.array([tf_map[t] for t in terms], dtype=np.float64)
        idf = np.array([idf_map[t] for t in terms], dtype=np.float64)
        norm = 1.0 - b + b * len(document) / avg_len
        numerator = tf * (k1 + 1.0)
        denominator = tf + k1 * norm
        results.append(DocScore(index, float(np.sum(idf * numerator / denominator))))

    logger.debug("Scored %d documents against %d query terms", len(results), len(query_terms))
    return results


class BM25:
    """
    BM25 ranking over shared corpus statistics.

    Args:
        stats: Corpus statistics (read-only).
        k1 (float): Term frequency saturation parameter.
        b (float): Length normalization parameter.
    """

    def __init__(self, stats: StatisticsProtocol, k1: float = DEFAULT_K1, b: float = DEFAULT_B):
        self.stats = stats
        self.k1 = k1
        self.b = b

    def score(self, query: Sequence[int], documents: Sequence[Sequence[int]]) -> list[DocScore]:
        return bm25(self.stats, query, documents, self.k1, self.b)

    def rank(
        self,
        query: Sequence[int],
        documents: Sequence[Sequence[int]],
        top_k: int | None = None,
    ) -> list[DocScore]:
        return rank(self.score(query, documents), top_k)
