"""Corpus loader — builds Document lists from folders, delimited files and
packaged sample corpora."""

import csv
import logging
import re
from importlib import resources
from pathlib import Path
from typing import Callable

import markdown
from pypdf import PdfReader

from textdtm.models import Document

logger = logging.getLogger(__name__)

# Package holding the built-in sample corpora (one TSV file each).
_BUILTIN_PACKAGE = "textdtm.data"


_TAG_RE = re.compile(r"<[^>]+>")


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _read_markdown(path: Path) -> str:
    # Render to HTML first so markup syntax never reaches the tokenizer.
    return _TAG_RE.sub("", markdown.markdown(_read_text(path)))


def _read_pdf(path: Path) -> str:
    pages = PdfReader(str(path)).pages
    return "\n".join(page.extract_text() or "" for page in pages)


# File suffix -> text extractor for folder corpora.
READERS: dict[str, Callable[[Path], str]] = {
    ".txt": _read_text,
    ".md": _read_markdown,
    ".pdf": _read_pdf,
}


def _supported_files(folder: Path) -> list[Path]:
    return [
        path
        for path in sorted(folder.iterdir())
        if path.is_file() and path.suffix.lower() in READERS
    ]


def _file_document(path: Path) -> Document | None:
    """Read *path* into a Document, or ``None`` when it holds no text."""
    suffix = path.suffix.lower()
    try:
        text = READERS[suffix](path)
    except Exception:
        logger.exception("Failed to load %s", path.name)
        return None
    if not text.strip():
        logger.warning("Skipping empty file: %s", path.name)
        return None
    return Document(
        doc_id=path.name,
        text=text,
        metadata={"source": path.name, "file_type": suffix},
    )


def load_documents(folder_path: str | Path) -> list[Document]:
    """One document per ``.txt``/``.md``/``.pdf`` file, in filename order.

    The file name is the ``doc_id``. Files that are blank or cannot be
    read are logged and left out of the corpus.

    Raises:
        FileNotFoundError: If the folder does not exist.
        NotADirectoryError: If the path is not a directory.
    """
    folder = Path(folder_path)
    if not folder.exists():
        raise FileNotFoundError(f"Folder not found: {folder_path}")
    if not folder.is_dir():
        raise NotADirectoryError(f"Not a directory: {folder_path}")

    documents = [
        doc for doc in map(_file_document, _supported_files(folder)) if doc is not None
    ]
    logger.info("Loaded %d document(s) from %s", len(documents), folder)
    return documents


def _read_rows(
    handle,
    source: str,
    text_column: str,
    id_column: str | None,
    delimiter: str,
) -> list[Document]:
    reader = csv.DictReader(handle, delimiter=delimiter)
    fields = reader.fieldnames or []
    for column in (text_column, id_column):
        if column is not None and column not in fields:
            raise KeyError(f"Column {column!r} not found in {source}")

    documents: list[Document] = []
    for row_number, row in enumerate(reader, start=1):
        if id_column:
            # Short rows leave trailing columns as None.
            doc_id = (row[id_column] or "").strip()
            if not doc_id:
                raise ValueError(
                    f"Row {row_number} of {source} has no value in column {id_column!r}"
                )
        else:
            doc_id = str(row_number)
        documents.append(
            Document(
                doc_id=doc_id,
                text=row[text_column] or "",
                metadata={"source": source, "row": row_number},
            )
        )
    return documents


def _delimiter_for(path: Path) -> str:
    return "\t" if path.suffix.lower() in (".tsv", ".tab") else ","


def load_delimited(
    path: str | Path,
    text_column: str = "text",
    id_column: str | None = None,
    delimiter: str | None = None,
) -> list[Document]:
    """Load one document per row of a comma- or tab-separated file.

    Args:
        path: The delimited file. Must have a header row.
        text_column: Column holding the document text.
        id_column: Column holding document ids. When omitted, ids are
            1-based row numbers.
        delimiter: Field separator. Defaults to tab for ``.tsv``/``.tab``
            files and comma otherwise.

    Returns:
        Documents in file order.

    Raises:
        FileNotFoundError: If *path* does not exist.
        KeyError: If a named column is missing from the header.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    with file_path.open(encoding="utf-8", newline="") as handle:
        documents = _read_rows(
            handle,
            file_path.name,
            text_column,
            id_column,
            delimiter or _delimiter_for(file_path),
        )

    logger.info("Loaded %d row(s) from %s", len(documents), file_path.name)
    return documents


def available_corpora() -> list[str]:
    """Names of the sample corpora shipped with the package."""
    root = resources.files(_BUILTIN_PACKAGE)
    return sorted(
        entry.name[: -len(".tsv")]
        for entry in root.iterdir()
        if entry.name.endswith(".tsv")
    )


def load_builtin_corpus(name: str) -> list[Document]:
    """Load a packaged sample corpus by name.

    Each corpus is a TSV resource with ``doc_id`` and ``text`` columns.

    Raises:
        ValueError: If no corpus called *name* is shipped.
    """
    if name not in available_corpora():
        known = ", ".join(available_corpora())
        raise ValueError(f"Unknown built-in corpus {name!r} (available: {known})")

    resource = resources.files(_BUILTIN_PACKAGE).joinpath(f"{name}.tsv")
    with resource.open("r", encoding="utf-8", newline="") as handle:
        documents = _read_rows(handle, f"{name}.tsv", "text", "doc_id", "\t")

    logger.info("Loaded built-in corpus %s (%d documents)", name, len(documents))
    return documents
