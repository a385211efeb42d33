"""Ranking helpers — top terms per document or across the corpus."""

import numpy as np

from textdtm.dtm import DocumentTermMatrix
from textdtm.models import RankedTerm
from textdtm.vocabulary import Vocabulary
from textdtm.weighting import WeightedMatrix


def _rank(weights: np.ndarray, vocabulary: Vocabulary, n: int) -> list[RankedTerm]:
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    # Stable sort on the negated weights keeps vocabulary order among ties.
    order = np.argsort(-weights, kind="stable")
    ranked: list[RankedTerm] = []
    for idx in order:
        value = weights[idx]
        if np.isnan(value) or value == 0:
            continue
        ranked.append(RankedTerm(term=vocabulary[idx], value=float(value)))
        if len(ranked) == n:
            break
    return ranked


def top_terms(
    matrix: DocumentTermMatrix | WeightedMatrix, doc_id: str, n: int = 10
) -> list[RankedTerm]:
    """Return the *n* highest-weighted terms of one document.

    Zero and NaN weights are left out; ties keep vocabulary order.

    Raises:
        KeyError: If *doc_id* is not a row of *matrix*.
        ValueError: If *n* is not positive.
    """
    return _rank(matrix.row(doc_id).astype(np.float64), matrix.vocabulary, n)


def top_terms_by_document(
    matrix: DocumentTermMatrix | WeightedMatrix, n: int = 10
) -> dict[str, list[RankedTerm]]:
    """``top_terms`` for every document, keyed by document id in row order."""
    return {doc_id: top_terms(matrix, doc_id, n) for doc_id in matrix.doc_ids}


def corpus_top_terms(dtm: DocumentTermMatrix, n: int = 10) -> list[RankedTerm]:
    """Rank terms by their total count across the whole corpus."""
    return _rank(dtm.column_sums().astype(np.float64), dtm.vocabulary, n)
