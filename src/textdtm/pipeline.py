"""Pipeline — one forward pass from documents to weighted matrices."""

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from textdtm.config import PipelineConfig
from textdtm.dtm import DocumentTermMatrix, build_dtm
from textdtm.models import Document
from textdtm.tokenizer import tokenize_documents
from textdtm.vocabulary import Vocabulary, build_vocabulary
from textdtm.weighting import (
    IDFVector,
    WeightedMatrix,
    inverse_document_frequency,
    relative_frequency,
    tfidf,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class PipelineResult:
    """Everything derived from a corpus in one run."""

    vocabulary: Vocabulary
    dtm: DocumentTermMatrix
    relative_frequency: WeightedMatrix
    idf: IDFVector
    tfidf: WeightedMatrix

    def matrix(self, weighting: str) -> DocumentTermMatrix | WeightedMatrix:
        """Select a result matrix by name (``count``, ``relative``, ``tfidf``)."""
        matrices = {
            "count": self.dtm,
            "relative": self.relative_frequency,
            "tfidf": self.tfidf,
        }
        if weighting not in matrices:
            raise ValueError(f"Unknown weighting {weighting!r}")
        return matrices[weighting]


def preprocess_text(text: str, lowercase: bool = False) -> str:
    """Apply the caller-side normalization that precedes tokenization."""
    return text.lower() if lowercase else text


def remove_stopwords(tokens: Sequence[str], stopwords: Iterable[str]) -> list[str]:
    """Drop every token found in *stopwords*, keeping order."""
    stop = set(stopwords)
    return [t for t in tokens if t not in stop]


def run_pipeline(
    documents: Sequence[Document],
    config: PipelineConfig | None = None,
) -> PipelineResult:
    """Tokenize *documents* and derive the vocabulary, DTM and weightings.

    Args:
        documents: The corpus, in row order. Must not be empty.
        config: Pipeline settings. Uses defaults if not provided.

    Returns:
        A ``PipelineResult`` bundling every derived structure.

    Raises:
        ValueError: If *documents* is empty.
        TextDTMError: Any pipeline error (invalid policy, empty document
            under the ``raise`` policy, ...) aborts the whole run.
    """
    if not documents:
        raise ValueError("Cannot run the pipeline on an empty corpus")

    cfg = config or PipelineConfig()

    if cfg.lowercase:
        documents = [
            Document(
                doc_id=doc.doc_id,
                text=preprocess_text(doc.text, lowercase=True),
                metadata=doc.metadata,
            )
            for doc in documents
        ]

    corpus = tokenize_documents(documents, cfg.tokenizer.to_policy())
    if cfg.stopwords:
        corpus = [
            (doc_id, remove_stopwords(tokens, cfg.stopwords))
            for doc_id, tokens in corpus
        ]

    vocabulary = build_vocabulary(tokens for _, tokens in corpus)
    dtm = build_dtm(corpus, vocabulary)
    logger.info(
        "Built %d x %d document-term matrix (%s policy).",
        dtm.shape[0],
        dtm.shape[1],
        cfg.tokenizer.policy,
    )

    rel = relative_frequency(dtm, empty=cfg.weighting.empty_documents)
    idf = inverse_document_frequency(dtm)
    tf = rel if cfg.weighting.tf == "relative" else dtm
    weighted = tfidf(tf, idf)

    return PipelineResult(
        vocabulary=vocabulary,
        dtm=dtm,
        relative_frequency=rel,
        idf=idf,
        tfidf=weighted,
    )
