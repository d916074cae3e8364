"""
Ranking helpers for BM25 result lists.

This module provides:
1. Efficient top-k - np.argpartition for O(n) selection
2. Sorting - order a result list by descending score

Usage:
    from ranking_bm25.ranking_utils import (
        rank,
        select_top_k,
    )
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from ranking_bm25.scorer import DocScore


# =============================================================================
# Efficient Top-K Selection
# =============================================================================


def select_top_k(
    scores: NDArray[np.float64],
    top_k: int | None,
) -> tuple[NDArray[np.int64], NDArray[np.float64]]:
    """
    Select top-k documents efficiently.

    Uses np.argpartition for O(n) selection when k << n,
    falling back to full sort when k is large. Equal scores keep
    ascending index order; a top_k of zero or less selects nothing.

    Args:
        scores: Score array for all documents (N,)
        top_k: Number of top results (None for all)

    Returns:
        (sorted_indices, sorted_scores) in descending order
    """
    scores = np.asarray(scores, dtype=np.float64)
    n = len(scores)

    if top_k is not None and top_k <= 0:
        return np.array([], dtype=np.int64), np.array([], dtype=np.float64)

    if top_k is not None and top_k < n:
        # O(n) partition finds the k-th score; ties at the cut go to lower indices
        kth_score = -np.partition(-scores, top_k - 1)[top_k - 1]
        above = np.flatnonzero(scores > kth_score)
        tied = np.flatnonzero(scores == kth_score)[: top_k - len(above)]
        top_k_indices = np.concatenate([above, tied])
        sorted_top_k = top_k_indices[np.argsort(-scores[top_k_indices], kind="stable")]
        return sorted_top_k.astype(np.int64), scores[sorted_top_k]
    else:
        # Full sort O(n log n)
        sorted_indices = np.argsort(-scores, kind="stable").astype(np.int64)
        return sorted_indices, scores[sorted_indices]


def scores_array(results: Sequence[DocScore]) -> NDArray[np.float64]:
    """Scores of a result list as an array indexed by list position."""
    return np.array([r.score for r in results], dtype=np.float64)


# =============================================================================
# Sorting
# =============================================================================


def rank(results: Sequence[DocScore], top_k: int | None = None) -> list[DocScore]:
    """
    Orders results by descending score.

    Equal scores keep their input order.

    Args:
        results: Scores as returned by the scorer
        top_k: Number of top results (None for all, zero or less for none)

    Returns:
        A new list, highest score first
    """
    indices, _ = select_top_k(scores_array(results), top_k)
    return [results[i] for i in indices]


# =============================================================================
# Module exports
# =============================================================================

__all__ = [
    "rank",
    "select_top_k",
    "scores_array",
]
