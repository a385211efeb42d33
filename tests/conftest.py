"""Shared fixtures for the test suite."""

import tempfile
from pathlib import Path

import pytest

from textdtm.dtm import DocumentTermMatrix, build_dtm
from textdtm.models import Document
from textdtm.vocabulary import build_vocabulary


@pytest.fixture
def sample_documents() -> list[Document]:
    return [
        Document(doc_id="d1", text="the cat sat"),
        Document(doc_id="d2", text="the dog ran"),
    ]


@pytest.fixture
def sample_corpus() -> list[tuple[str, list[str]]]:
    return [
        ("d1", ["the", "cat", "sat"]),
        ("d2", ["the", "dog", "ran"]),
    ]


@pytest.fixture
def sample_dtm(sample_corpus) -> DocumentTermMatrix:
    vocabulary = build_vocabulary(tokens for _, tokens in sample_corpus)
    return build_dtm(sample_corpus, vocabulary)


@pytest.fixture
def uneven_corpus() -> list[tuple[str, list[str]]]:
    return [
        ("a", ["apple", "apple", "pear", "fig"]),
        ("b", ["pear", "plum"]),
        ("c", ["apple", "plum", "plum", "plum", "kiwi"]),
    ]


@pytest.fixture
def uneven_dtm(uneven_corpus) -> DocumentTermMatrix:
    vocabulary = build_vocabulary(tokens for _, tokens in uneven_corpus)
    return build_dtm(uneven_corpus, vocabulary)


@pytest.fixture
def tmp_docs_dir() -> Path:
    """Create a temporary directory with sample documents."""
    with tempfile.TemporaryDirectory() as tmpdir:
        d = Path(tmpdir)

        (d / "sample.txt").write_text(
            "The cat sat on the mat.",
            encoding="utf-8",
        )
        (d / "notes.md").write_text(
            "# Notes\n\nThe dog ran **after** the cat.",
            encoding="utf-8",
        )
        # Unsupported file — should be skipped.
        (d / "image.png").write_bytes(b"\x89PNG\r\n")

        yield d


@pytest.fixture
def empty_docs_dir() -> Path:
    """Create an empty temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
