"""
Score the lines of a text file against a query.

Usage:
    ranking-bm25 <path> --query <text> [--k1 1.5] [--b 0.75] [--top-k 3] [--verbose]

Each line of the file is one document. Use "-" to read from stdin.

Examples:
    ranking-bm25 mobydick.txt --query ishmael
    python -m ranking_bm25 mobydick.txt --query whenever --top-k 5
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from ranking_bm25.scorer import DEFAULT_B, DEFAULT_K1, BM25
from ranking_bm25.statistics import CorpusStatistics, StatisticsError
from ranking_bm25.vocabulary import Vocabulary

logger = logging.getLogger(__name__)


def read_documents(path: str) -> list[str]:
    if path == "-":
        text = sys.stdin.read()
    else:
        text = Path(path).read_text(encoding="utf-8")
    return [line for line in text.splitlines() if line.strip()]


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ranking-bm25", description="Rank documents against a query with BM25"
    )
    parser.add_argument("path", help="Text file with one document per line ('-' for stdin)")
    parser.add_argument("--query", required=True, help="Query text")
    parser.add_argument("--k1", type=float, default=DEFAULT_K1, help="TF saturation parameter")
    parser.add_argument("--b", type=float, default=DEFAULT_B, help="Length normalization parameter")
    parser.add_argument("--top-k", type=positive_int, default=3, help="Number of results to print")
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        texts = read_documents(args.path)
        vocabulary = Vocabulary().fit(texts)
        documents = [vocabulary.encode(text) for text in texts]
        stats = CorpusStatistics.from_documents(documents)
    except (OSError, StatisticsError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    query = vocabulary.encode(args.query)
    logger.info(
        "Loaded %d documents, %d terms; query has %d known terms",
        len(documents),
        len(vocabulary),
        len(query),
    )

    ranker = BM25(stats, k1=args.k1, b=args.b)
    print(f'Top {args.top_k} Relevant Docs to "{args.query}":')
    for result in ranker.rank(query, documents, top_k=args.top_k):
        print(f"\tID   : {result.id}")
        print(f"\tScore: {result.score:1.3f}")
        print(f"\tDoc  : {json.dumps(texts[result.id], ensure_ascii=False)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
