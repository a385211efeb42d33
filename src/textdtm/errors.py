"""Exception hierarchy for the text analysis pipeline."""


class TextDTMError(Exception):
    """Base class for every error raised by the pipeline."""


class InvalidPolicyError(TextDTMError, ValueError):
    """Unrecognized tokenization policy or out-of-range policy parameters."""


class UnknownTokenError(TextDTMError, KeyError):
    """A token is not part of the supplied vocabulary."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class DuplicateDocumentError(TextDTMError, ValueError):
    """Two documents in one corpus share an identifier."""


class EmptyDocumentError(TextDTMError, ValueError):
    """Relative frequency requested for a document with no tokens."""


class DimensionMismatchError(TextDTMError, ValueError):
    """A term-frequency matrix and an IDF vector disagree on their terms."""
