"""Parallel scoring of many queries against one document list."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from ranking_bm25.scorer import DEFAULT_B, DEFAULT_K1, DocScore, bm25
from ranking_bm25.statistics import StatisticsProtocol, average_document_length

logger = logging.getLogger(__name__)

# Default number of workers for parallel query processing
DEFAULT_NUM_WORKERS = 8

# Minimum queries before enabling parallelism
MIN_QUERIES_FOR_PARALLEL = 10


def batch_score_parallel(
    stats: StatisticsProtocol,
    queries: Sequence[Sequence[int]],
    documents: Sequence[Sequence[int]],
    k1: float = DEFAULT_K1,
    b: float = DEFAULT_B,
    num_workers: int = DEFAULT_NUM_WORKERS,
    min_queries_for_parallel: int = MIN_QUERIES_FOR_PARALLEL,
) -> list[list[DocScore]]:
    """
    Score several queries against the same documents.

    The statistics are only read, so one instance is shared by all workers.

    Args:
        stats: Corpus statistics
        queries: List of queries as term ids
        documents: Candidate documents as term ids
        k1: TF saturation parameter
        b: Length normalization parameter
        num_workers: Number of parallel workers
        min_queries_for_parallel: Minimum queries before enabling parallelism

    Returns:
        One result list per query, in query order
    """
    if not queries:
        return []

    # Fail before spawning workers
    average_document_length(stats)

    def score_single(query: Sequence[int]) -> list[DocScore]:
        return bm25(stats, query, documents, k1, b)

    # For small batches, run sequentially
    if len(queries) < min_queries_for_parallel:
        return [score_single(query) for query in queries]

    logger.debug("Scoring %d queries with %d workers", len(queries), num_workers)
    with ThreadPoolExecutor(max_workers=num_workers) as executor:
        results = list(executor.map(score_single, queries))

    return results


__all__ = [
    "batch_score_parallel",
    "DEFAULT_NUM_WORKERS",
    "MIN_QUERIES_FOR_PARALLEL",
]
