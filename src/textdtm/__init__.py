"""textdtm — tokenization, document-term matrices and term weighting."""

from textdtm.config import (
    PipelineConfig,
    ReportConfig,
    TokenizerConfig,
    WeightingConfig,
)
from textdtm.corpus_loader import (
    available_corpora,
    load_builtin_corpus,
    load_delimited,
    load_documents,
)
from textdtm.dtm import DocumentTermMatrix, build_dtm, frequency_table
from textdtm.errors import (
    DimensionMismatchError,
    DuplicateDocumentError,
    EmptyDocumentError,
    InvalidPolicyError,
    TextDTMError,
    UnknownTokenError,
)
from textdtm.models import Document, RankedTerm, TokenizationPolicy
from textdtm.pipeline import PipelineResult, run_pipeline
from textdtm.reporting import corpus_top_terms, top_terms, top_terms_by_document
from textdtm.tokenizer import tokenize, tokenize_documents
from textdtm.vocabulary import Vocabulary, build_vocabulary
from textdtm.weighting import (
    IDFVector,
    WeightedMatrix,
    inverse_document_frequency,
    relative_frequency,
    tfidf,
)

__all__ = [
    "PipelineConfig",
    "ReportConfig",
    "TokenizerConfig",
    "WeightingConfig",
    "available_corpora",
    "load_builtin_corpus",
    "load_delimited",
    "load_documents",
    "DocumentTermMatrix",
    "build_dtm",
    "frequency_table",
    "DimensionMismatchError",
    "DuplicateDocumentError",
    "EmptyDocumentError",
    "InvalidPolicyError",
    "TextDTMError",
    "UnknownTokenError",
    "Document",
    "RankedTerm",
    "TokenizationPolicy",
    "PipelineResult",
    "run_pipeline",
    "corpus_top_terms",
    "top_terms",
    "top_terms_by_document",
    "tokenize",
    "tokenize_documents",
    "Vocabulary",
    "build_vocabulary",
    "IDFVector",
    "WeightedMatrix",
    "inverse_document_frequency",
    "relative_frequency",
    "tfidf",
]
