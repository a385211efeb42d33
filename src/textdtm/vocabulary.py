"""Vocabulary builder — the sorted set of distinct tokens in a corpus."""

import logging
from typing import Iterable, Iterator, Sequence

from textdtm.errors import UnknownTokenError

logger = logging.getLogger(__name__)


class Vocabulary:
    """Sorted, deduplicated terms with stable 0-based column indices.

    Terms are ordered by Python string comparison (code point order), so
    the ordering never depends on the locale.
    """

    __slots__ = ("_terms", "_index")

    def __init__(self, terms: Iterable[str]) -> None:
        self._terms: tuple[str, ...] = tuple(sorted(set(terms)))
        self._index: dict[str, int] = {t: i for i, t in enumerate(self._terms)}

    @property
    def terms(self) -> tuple[str, ...]:
        return self._terms

    def index(self, term: str) -> int:
        """Return the column index of *term*.

        Raises:
            UnknownTokenError: If *term* is not in the vocabulary.
        """
        try:
            return self._index[term]
        except KeyError:
            raise UnknownTokenError(
                f"Token {term!r} is not in the vocabulary"
            ) from None

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __contains__(self, term: object) -> bool:
        return term in self._index

    def __getitem__(self, position: int) -> str:
        return self._terms[position]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return self._terms == other._terms

    def __hash__(self) -> int:
        return hash(self._terms)

    def __repr__(self) -> str:
        return f"Vocabulary({len(self._terms)} terms)"


def build_vocabulary(corpus: Iterable[Sequence[str]]) -> Vocabulary:
    """Collect every distinct token across *corpus*.

    Args:
        corpus: One token sequence per document.

    Returns:
        The corpus vocabulary. Identical corpora always give identical
        vocabularies.
    """
    seen: set[str] = set()
    for tokens in corpus:
        seen.update(tokens)

    vocabulary = Vocabulary(seen)
    logger.debug("Built vocabulary of %d term(s).", len(vocabulary))
    return vocabulary
