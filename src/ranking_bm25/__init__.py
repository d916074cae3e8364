"""BM25 scoring of term-id documents against precomputed corpus statistics."""

from ranking_bm25.scorer import BM25, DEFAULT_B, DEFAULT_K1, DocScore, bm25
from ranking_bm25.statistics import CorpusStatistics, StatisticsError, StatisticsProtocol
from ranking_bm25.vocabulary import Vocabulary, bag_of_words, tokenize
from ranking_bm25.ranking_utils import rank, select_top_k
from ranking_bm25.batch import batch_score_parallel

__all__ = [
    "BM25",
    "DEFAULT_B",
    "DEFAULT_K1",
    "DocScore",
    "bm25",
    "CorpusStatistics",
    "StatisticsError",
    "StatisticsProtocol",
    "Vocabulary",
    "bag_of_words",
    "tokenize",
    "batch_score_parallel",
    "rank",
    "select_top_k",
]
