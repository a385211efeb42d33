"""Weighting engine — relative frequency, IDF and TF-IDF from a finished DTM."""

import logging
from dataclasses import dataclass, field

import numpy as np

from textdtm.dtm import DocumentTermMatrix, readonly, row_lookup
from textdtm.errors import (
    DimensionMismatchError,
    EmptyDocumentError,
    UnknownTokenError,
)
from textdtm.vocabulary import Vocabulary

logger = logging.getLogger(__name__)

_EMPTY_POLICIES = ("raise", "nan")


@dataclass(frozen=True, eq=False)
class WeightedMatrix:
    """A float matrix sharing the row and column labels of its DTM."""

    values: np.ndarray
    doc_ids: tuple[str, ...]
    vocabulary: Vocabulary
    scheme: str
    _rows: dict[str, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_rows", row_lookup(self.doc_ids))

    @property
    def shape(self) -> tuple[int, int]:
        return self.values.shape

    def row(self, doc_id: str) -> np.ndarray:
        return self.values[self._rows[doc_id]]


@dataclass(frozen=True, eq=False)
class IDFVector:
    """One inverse document frequency per vocabulary term."""

    values: np.ndarray
    vocabulary: Vocabulary

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, term: str) -> float:
        return float(self.values[self.vocabulary.index(term)])


def relative_frequency(
    dtm: DocumentTermMatrix, empty: str = "raise"
) -> WeightedMatrix:
    """Divide each DTM row by its sum.

    Args:
        dtm: Raw count matrix.
        empty: What to do with a document that has no tokens. ``"raise"``
            raises ``EmptyDocumentError``; ``"nan"`` fills its row with NaN.

    Returns:
        A ``relative_frequency`` matrix whose non-empty rows sum to 1.

    Raises:
        EmptyDocumentError: If a row sums to zero and *empty* is ``"raise"``.
        ValueError: If *empty* is not a known policy.
    """
    if empty not in _EMPTY_POLICIES:
        raise ValueError(
            f"empty must be one of {', '.join(_EMPTY_POLICIES)}, got {empty!r}"
        )

    row_sums = dtm.row_sums()
    empty_rows = np.flatnonzero(row_sums == 0)
    if empty_rows.size and empty == "raise":
        names = ", ".join(dtm.doc_ids[i] for i in empty_rows)
        raise EmptyDocumentError(f"Document(s) with no tokens: {names}")

    values = np.full(dtm.shape, np.nan, dtype=np.float64)
    filled = row_sums > 0
    values[filled] = dtm.counts[filled] / row_sums[filled][:, np.newaxis]
    if empty_rows.size:
        logger.warning("Filled %d empty document row(s) with NaN.", empty_rows.size)

    return WeightedMatrix(
        values=readonly(values),
        doc_ids=dtm.doc_ids,
        vocabulary=dtm.vocabulary,
        scheme="relative_frequency",
    )


def inverse_document_frequency(dtm: DocumentTermMatrix) -> IDFVector:
    """Compute ``log10(n_documents / document_frequency)`` per term.

    Raises:
        UnknownTokenError: If a term occurs in no document, which means the
            vocabulary was not built from this corpus.
    """
    df = dtm.document_frequency()
    unseen = np.flatnonzero(df == 0)
    if unseen.size:
        terms = ", ".join(repr(dtm.vocabulary[i]) for i in unseen[:5])
        raise UnknownTokenError(f"Term(s) absent from every document: {terms}")

    values = np.log10(dtm.n_documents / df.astype(np.float64))
    return IDFVector(values=readonly(values), vocabulary=dtm.vocabulary)


def tfidf(tf: DocumentTermMatrix | WeightedMatrix, idf: IDFVector) -> WeightedMatrix:
    """Weight every column of a term-frequency matrix by its IDF.

    Args:
        tf: Raw counts or a relative-frequency matrix, whichever "tf"
            variant the caller prefers.
        idf: IDF vector computed from the same DTM.

    Returns:
        A ``tfidf`` matrix with the same shape and labels as *tf*.

    Raises:
        DimensionMismatchError: If *tf* and *idf* do not cover the same
            terms in the same order.
    """
    values = tf.counts if isinstance(tf, DocumentTermMatrix) else tf.values
    if values.shape[1] != len(idf):
        raise DimensionMismatchError(
            f"Matrix has {values.shape[1]} term column(s) but IDF vector has "
            f"{len(idf)} value(s)"
        )
    if tf.vocabulary != idf.vocabulary:
        raise DimensionMismatchError("Matrix and IDF vector use different vocabularies")

    weighted = values * idf.values[np.newaxis, :]
    return WeightedMatrix(
        values=readonly(weighted.astype(np.float64)),
        doc_ids=tf.doc_ids,
        vocabulary=tf.vocabulary,
        scheme="tfidf",
    )
