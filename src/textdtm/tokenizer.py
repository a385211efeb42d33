"""Tokenizer — splits document text into tokens under a configurable policy."""

import logging
import re
from typing import Callable, Iterable

from textdtm.errors import InvalidPolicyError
from textdtm.models import POLICY_KINDS, Document, TokenizationPolicy

logger = logging.getLogger(__name__)

# Word runs, keeping internal apostrophes ("don't", "o'clock").
_WORD_RE = re.compile(r"\w+(?:['’]\w+)*")

_SIZED_KINDS = ("ngram", "character_shingle")


def _split_whitespace(text: str, policy: TokenizationPolicy) -> list[str]:
    return text.split()


def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidPolicyError(f"Invalid regex pattern {pattern!r}: {exc}") from exc


def _split_regex(text: str, policy: TokenizationPolicy) -> list[str]:
    pattern = _compile(policy.pattern)
    # re.split interleaves captured groups with the pieces; keep the pieces.
    pieces = pattern.split(text)[:: pattern.groups + 1]
    return [piece for piece in pieces if piece]


def _words(text: str, policy: TokenizationPolicy) -> list[str]:
    return _WORD_RE.findall(text)


def _sized_runs(units: list[str], n: int, n_min: int, sep: str) -> list[str]:
    """Join every run of *k* consecutive units for *k* in ``[n_min, n]``.

    Runs are grouped by size, smallest first, and each group keeps text
    order. Sizes longer than *units* contribute nothing.
    """
    tokens: list[str] = []
    for size in range(n_min, n + 1):
        if len(units) < size:
            continue
        for idx in range(len(units) - size + 1):
            tokens.append(sep.join(units[idx : idx + size]))
    return tokens


def _ngrams(text: str, policy: TokenizationPolicy) -> list[str]:
    return _sized_runs(_WORD_RE.findall(text), policy.n, policy.n_min, " ")


def _characters(text: str, policy: TokenizationPolicy) -> list[str]:
    return [ch for ch in text if not ch.isspace()]


def _character_shingles(text: str, policy: TokenizationPolicy) -> list[str]:
    return _sized_runs(_characters(text, policy), policy.n, policy.n_min, "")


# Policy kinds mapped to their splitting functions.
SPLITTERS: dict[str, Callable[[str, TokenizationPolicy], list[str]]] = {
    "whitespace": _split_whitespace,
    "regex": _split_regex,
    "word": _words,
    "ngram": _ngrams,
    "character": _characters,
    "character_shingle": _character_shingles,
}


def validate_policy(policy: TokenizationPolicy) -> None:
    """Check that *policy* names a known kind with usable parameters.

    Raises:
        InvalidPolicyError: If the kind is unknown, or a sized kind has
            ``n < 1`` or ``n_min`` outside ``[1, n]``, or a regex
            pattern does not compile.
    """
    if policy.kind not in SPLITTERS:
        known = ", ".join(POLICY_KINDS)
        raise InvalidPolicyError(
            f"Unknown tokenization policy {policy.kind!r} (expected one of: {known})"
        )
    if policy.kind in _SIZED_KINDS:
        if policy.n < 1:
            raise InvalidPolicyError(f"n must be at least 1, got {policy.n}")
        if not 1 <= policy.n_min <= policy.n:
            raise InvalidPolicyError(
                f"n_min must be between 1 and n ({policy.n}), got {policy.n_min}"
            )
    if policy.kind == "regex":
        _compile(policy.pattern)


def tokenize(text: str, policy: TokenizationPolicy | None = None) -> list[str]:
    """Split *text* into an ordered list of tokens.

    Case is left untouched; normalizing it is the caller's job. The
    result is a pure function of ``(text, policy)``.

    Args:
        text: Raw document text. An empty string yields an empty list.
        policy: Tokenization policy. Defaults to the ``word`` policy.

    Returns:
        Tokens in text order, duplicates kept. For ``ngram`` and
        ``character_shingle`` all sizes from ``n_min`` to ``n`` are
        produced, grouped by size.

    Raises:
        InvalidPolicyError: If the policy is not usable.
    """
    if policy is None:
        policy = TokenizationPolicy()
    validate_policy(policy)
    if not text:
        return []
    return SPLITTERS[policy.kind](text, policy)


def tokenize_documents(
    documents: Iterable[Document],
    policy: TokenizationPolicy | None = None,
) -> list[tuple[str, list[str]]]:
    """Tokenize every document, keeping corpus order.

    Args:
        documents: Source documents.
        policy: Tokenization policy shared by all documents.

    Returns:
        ``(doc_id, tokens)`` pairs, one per document.
    """
    if policy is None:
        policy = TokenizationPolicy()
    validate_policy(policy)

    corpus = [(doc.doc_id, tokenize(doc.text, policy)) for doc in documents]
    logger.debug(
        "Tokenized %d document(s) with the %s policy.", len(corpus), policy.kind
    )
    return corpus
