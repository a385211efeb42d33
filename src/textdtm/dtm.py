"""DTM builder — assembles the documents x vocabulary count matrix."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Sequence

import numpy as np

from textdtm.errors import DuplicateDocumentError, UnknownTokenError
from textdtm.vocabulary import Vocabulary

logger = logging.getLogger(__name__)


def readonly(values: np.ndarray) -> np.ndarray:
    values.flags.writeable = False
    return values


def row_lookup(doc_ids: Sequence[str]) -> dict[str, int]:
    return {doc_id: row for row, doc_id in enumerate(doc_ids)}


@dataclass(frozen=True, eq=False)
class DocumentTermMatrix:
    """Raw token counts, rows labelled by document id, columns by term."""

    counts: np.ndarray
    doc_ids: tuple[str, ...]
    vocabulary: Vocabulary
    _rows: dict[str, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_rows", row_lookup(self.doc_ids))

    @property
    def shape(self) -> tuple[int, int]:
        return self.counts.shape

    @property
    def n_documents(self) -> int:
        return len(self.doc_ids)

    def row_index(self, doc_id: str) -> int:
        """Return the row of *doc_id*; raises ``KeyError`` if absent."""
        return self._rows[doc_id]

    def row(self, doc_id: str) -> np.ndarray:
        return self.counts[self.row_index(doc_id)]

    def row_sums(self) -> np.ndarray:
        """Token count of every document."""
        return self.counts.sum(axis=1)

    def column_sums(self) -> np.ndarray:
        """Corpus-wide count of every term."""
        return self.counts.sum(axis=0)

    def document_frequency(self) -> np.ndarray:
        """Number of documents containing each term at least once."""
        return np.count_nonzero(self.counts, axis=0)


def frequency_table(tokens: Iterable[str]) -> Counter:
    """Count tokens; iteration follows first occurrence in *tokens*."""
    return Counter(tokens)


def build_dtm(
    corpus: Sequence[tuple[str, Sequence[str]]],
    vocabulary: Vocabulary,
) -> DocumentTermMatrix:
    """Build the document-term count matrix for *corpus*.

    The vocabulary must come from the same token corpus; every token of
    every document has to be one of its terms.

    Args:
        corpus: ``(doc_id, tokens)`` pairs in corpus order.
        vocabulary: Column labels, usually from ``build_vocabulary``.

    Returns:
        A ``DocumentTermMatrix`` whose row sums equal each document's
        token count.

    Raises:
        DuplicateDocumentError: If two documents share an id.
        UnknownTokenError: If a token is missing from *vocabulary*.
    """
    doc_ids = tuple(doc_id for doc_id, _ in corpus)
    if len(set(doc_ids)) != len(doc_ids):
        dupes = sorted(str(d) for d, c in Counter(doc_ids).items() if c > 1)
        raise DuplicateDocumentError(f"Duplicate document id(s): {', '.join(dupes)}")

    counts = np.zeros((len(doc_ids), len(vocabulary)), dtype=np.int64)

    for row, (doc_id, tokens) in enumerate(corpus):
        for token, count in frequency_table(tokens).items():
            if token not in vocabulary:
                raise UnknownTokenError(
                    f"Token {token!r} in document {doc_id!r} is not in the vocabulary"
                )
            counts[row, vocabulary.index(token)] = count

    logger.debug(
        "Built DTM with %d document(s) x %d term(s).", counts.shape[0], counts.shape[1]
    )
    return DocumentTermMatrix(
        counts=readonly(counts), doc_ids=doc_ids, vocabulary=vocabulary
    )
