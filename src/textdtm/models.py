"""Domain models for the text analysis pipeline."""

from dataclasses import dataclass, field

# Tokenization policies understood by ``textdtm.tokenizer.tokenize``.
POLICY_KINDS = (
    "whitespace",
    "regex",
    "word",
    "ngram",
    "character",
    "character_shingle",
)


@dataclass(frozen=True)
class Document:
    """A single corpus entry: a stable identifier and its raw text."""

    doc_id: str
    text: str
    metadata: dict = field(default_factory=dict)


@dataclass(frozen=True)
class TokenizationPolicy:
    """How a document's text is split into tokens.

    ``n`` and ``n_min`` only apply to the ``ngram`` and
    ``character_shingle`` kinds; ``pattern`` only to ``regex``.
    """

    kind: str = "word"
    n: int = 1
    n_min: int = 1
    pattern: str = r"\s+"


@dataclass(frozen=True)
class RankedTerm:
    """A term paired with the weight it was ranked by."""

    term: str
    value: float
