"""
Tokenization and term-id assignment.

Terms are mapped to integer ids in first-seen order so that queries,
documents and corpus statistics share one id space.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Iterator


def tokenize(text: str) -> list[str]:
    """Lowercases the text and splits it on whitespace."""
    return text.lower().split()


def bag_of_words(document: Iterable[int]) -> list[int]:
    """Sorted distinct term ids of a document."""
    return sorted(set(document))


class Vocabulary:
    """
    Bidirectional mapping between terms and integer ids.

    Args:
        terms (Iterable[str] | None): Optional terms to register up front.

    Attributes:
        terms (List[str]): Registered terms, indexed by id.
    """

    def __init__(self, terms: Iterable[str] | None = None):
        self._ids: dict[str, int] = {}
        self.terms: list[str] = []
        if terms is not None:
            for term in terms:
                self.add(term)

    def __len__(self) -> int:
        return len(self.terms)

    def __contains__(self, term: object) -> bool:
        return term in self._ids

    def __getitem__(self, term: str) -> int:
        return self._ids[term]

    def __iter__(self) -> Iterator[str]:
        return iter(self.terms)

    def get(self, term: str, default: int | None = None) -> int | None:
        return self._ids.get(term, default)

    def add(self, term: str) -> int:
        """Returns the id of ``term``, assigning the next free id if it is new."""
        term_id = self._ids.get(term)
        if term_id is None:
            term_id = len(self.terms)
            self._ids[term] = term_id
            self.terms.append(term)
        return term_id

    def fit(self, texts: Iterable[str]) -> "Vocabulary":
        for text in texts:
            for term in tokenize(text):
                self.add(term)
        return self

    def encode(self, text: str, grow: bool = False) -> list[int]:
        """
        Converts raw text into a document of term ids.

        Unknown terms are dropped unless ``grow`` is set, in which case they
        are added to the vocabulary.
        """
        if grow:
            return [self.add(term) for term in tokenize(text)]
        return [self._ids[term] for term in tokenize(text) if term in self._ids]

    def decode(self, document: Sequence[int]) -> list[str]:
        return [self.terms[term_id] for term_id in document]
