"""CLI interface for the text analysis pipeline."""

import argparse
import logging
import sys

from textdtm.config import PipelineConfig, TokenizerConfig, WeightingConfig
from textdtm.corpus_loader import load_builtin_corpus, load_delimited, load_documents
from textdtm.errors import TextDTMError
from textdtm.models import POLICY_KINDS, Document
from textdtm.pipeline import run_pipeline
from textdtm.reporting import corpus_top_terms, top_terms_by_document

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def load_source(args: argparse.Namespace) -> list[Document]:
    """Load the corpus named by the ``--folder``/``--table``/``--builtin`` flags."""
    if args.folder:
        return load_documents(args.folder)
    if args.table:
        return load_delimited(
            args.table, text_column=args.text_column, id_column=args.id_column
        )
    return load_builtin_corpus(args.builtin)


def build_config(args: argparse.Namespace) -> PipelineConfig:
    """Translate parsed arguments into a ``PipelineConfig``."""
    stopwords = [w.strip() for w in (args.stopwords or "").split(",") if w.strip()]
    return PipelineConfig(
        lowercase=args.lowercase,
        stopwords=stopwords,
        tokenizer=TokenizerConfig(
            policy=args.policy, n=args.n, n_min=args.n_min, pattern=args.pattern
        ),
        weighting=WeightingConfig(tf=args.tf, empty_documents=args.empty),
    )


def vocab(documents: list[Document], config: PipelineConfig) -> None:
    """Print the vocabulary size followed by one term per line."""
    result = run_pipeline(documents, config)
    print(f"Vocabulary: {len(result.vocabulary)} term(s)")
    for term in result.vocabulary:
        print(term)


def top(
    documents: list[Document],
    config: PipelineConfig,
    weighting: str = "tfidf",
    n: int | None = None,
) -> None:
    """Print the top *n* terms of every document under *weighting*.

    *n* defaults to ``config.report.top_n``.
    """
    result = run_pipeline(documents, config)
    if n is None:
        n = config.report.top_n
    ranked = top_terms_by_document(result.matrix(weighting), n)
    for doc_id, terms in ranked.items():
        print(f"\n{doc_id}")
        for item in terms:
            print(f"  {item.term}\t{item.value:.4f}")


def corpus_top(
    documents: list[Document], config: PipelineConfig, n: int | None = None
) -> None:
    """Print the *n* most frequent terms across the corpus."""
    result = run_pipeline(documents, config)
    if n is None:
        n = config.report.top_n
    for item in corpus_top_terms(result.dtm, n):
        print(f"{item.term}\t{int(item.value)}")


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--folder", type=str, help="Folder of .txt/.md/.pdf files")
    source.add_argument("--table", type=str, help="CSV or TSV file, one row per document")
    source.add_argument("--builtin", type=str, help="Name of a packaged sample corpus")

    parser.add_argument(
        "--text-column", type=str, default="text", help="Text column for --table"
    )
    parser.add_argument(
        "--id-column", type=str, default=None, help="Id column for --table"
    )
    parser.add_argument(
        "--policy", choices=POLICY_KINDS, default="word", help="Tokenization policy"
    )
    parser.add_argument("--n", type=int, default=1, help="Largest n-gram/shingle size")
    parser.add_argument(
        "--n-min", type=int, default=1, help="Smallest n-gram/shingle size"
    )
    parser.add_argument(
        "--pattern", type=str, default=r"\s+", help="Split pattern for --policy regex"
    )
    parser.add_argument(
        "--lowercase", action="store_true", help="Lower-case text before tokenizing"
    )
    parser.add_argument(
        "--stopwords", type=str, default="", help="Comma-separated words to drop"
    )
    parser.add_argument(
        "--tf",
        choices=("count", "relative"),
        default="count",
        help="Term-frequency variant used for TF-IDF",
    )
    parser.add_argument(
        "--empty",
        choices=("raise", "nan"),
        default="raise",
        help="Relative frequency of documents without tokens",
    )


def main() -> None:
    """CLI entry point — parse arguments and dispatch to a report."""
    parser = argparse.ArgumentParser(
        description="textdtm — document-term matrices and TF-IDF",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # vocab
    vocab_p = subparsers.add_parser("vocab", help="Print the corpus vocabulary")
    _add_common_arguments(vocab_p)

    # top
    top_p = subparsers.add_parser("top", help="Top terms per document")
    _add_common_arguments(top_p)
    top_p.add_argument(
        "--weighting",
        choices=("count", "relative", "tfidf"),
        default="tfidf",
        help="Matrix to rank by",
    )
    top_p.add_argument(
        "--top", type=int, default=None, help="Terms per document (default: REPORT_TOP_N)"
    )

    # corpus-top
    corpus_p = subparsers.add_parser("corpus-top", help="Most frequent corpus terms")
    _add_common_arguments(corpus_p)
    corpus_p.add_argument(
        "--top", type=int, default=None, help="Number of terms (default: REPORT_TOP_N)"
    )

    args = parser.parse_args()
    _setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        documents = load_source(args)
        config = build_config(args)
        if args.command == "vocab":
            vocab(documents, config)
        elif args.command == "top":
            top(documents, config, weighting=args.weighting, n=args.top)
        else:
            corpus_top(documents, config, n=args.top)
    except (TextDTMError, FileNotFoundError, NotADirectoryError, KeyError, ValueError) as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
