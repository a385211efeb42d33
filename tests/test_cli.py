"""Tests for the cli module."""

import argparse
import logging
import sys
from unittest.mock import patch

import pytest

from textdtm.cli import (
    _setup_logging,
    build_config,
    corpus_top,
    load_source,
    main,
    top,
    vocab,
)
from textdtm.config import PipelineConfig, ReportConfig
from textdtm.models import Document


def _args(**overrides) -> argparse.Namespace:
    values = {
        "folder": None,
        "table": None,
        "builtin": "pets",
        "text_column": "text",
        "id_column": None,
        "policy": "word",
        "n": 1,
        "n_min": 1,
        "pattern": r"\s+",
        "lowercase": False,
        "stopwords": "",
        "tf": "count",
        "empty": "raise",
    }
    values.update(overrides)
    return argparse.Namespace(**values)


class TestSetupLogging:
    def test_default_level_is_info(self) -> None:
        with patch("textdtm.cli.logging.basicConfig") as mock_basic:
            _setup_logging()
            mock_basic.assert_called_once()
            assert mock_basic.call_args[1]["level"] == logging.INFO

    def test_verbose_sets_debug(self) -> None:
        with patch("textdtm.cli.logging.basicConfig") as mock_basic:
            _setup_logging(verbose=True)
            mock_basic.assert_called_once()
            assert mock_basic.call_args[1]["level"] == logging.DEBUG


class TestLoadSource:
    @patch("textdtm.cli.load_documents")
    def test_folder(self, mock_load) -> None:
        load_source(_args(folder="/some/folder", builtin=None))
        mock_load.assert_called_once_with("/some/folder")

    @patch("textdtm.cli.load_delimited")
    def test_table(self, mock_load) -> None:
        load_source(_args(table="c.csv", builtin=None, id_column="id"))
        mock_load.assert_called_once_with("c.csv", text_column="text", id_column="id")

    def test_builtin(self) -> None:
        docs = load_source(_args())
        assert [d.doc_id for d in docs] == ["d1", "d2", "d3"]


class TestBuildConfig:
    def test_maps_arguments(self) -> None:
        cfg = build_config(
            _args(policy="ngram", n=2, lowercase=True, stopwords="the, a", tf="relative")
        )
        assert cfg.lowercase is True
        assert cfg.stopwords == ["the", "a"]
        assert cfg.tokenizer.policy == "ngram"
        assert cfg.tokenizer.n == 2
        assert cfg.weighting.tf == "relative"

    def test_empty_stopwords(self) -> None:
        assert build_config(_args()).stopwords == []


class TestCommands:
    documents = [
        Document(doc_id="d1", text="the cat sat"),
        Document(doc_id="d2", text="the dog ran"),
    ]

    def test_vocab(self, capsys) -> None:
        vocab(self.documents, PipelineConfig())
        out = capsys.readouterr().out.splitlines()
        assert out == ["Vocabulary: 5 term(s)", "cat", "dog", "ran", "sat", "the"]

    def test_top_tfidf(self, capsys) -> None:
        top(self.documents, PipelineConfig(), weighting="tfidf", n=1)
        out = capsys.readouterr().out
        assert "d1" in out
        assert "cat\t0.3010" in out
        assert "the\t" not in out

    def test_top_counts(self, capsys) -> None:
        top(self.documents, PipelineConfig(), weighting="count", n=5)
        out = capsys.readouterr().out
        assert "the\t1.0000" in out

    def test_corpus_top(self, capsys) -> None:
        corpus_top(self.documents, PipelineConfig(), n=1)
        assert capsys.readouterr().out == "the\t2\n"

    def test_corpus_top_defaults_to_report_setting(self, capsys) -> None:
        config = PipelineConfig(report=ReportConfig(top_n=2))
        corpus_top(self.documents, config)
        assert capsys.readouterr().out.splitlines() == ["the\t2", "cat\t1"]

    def test_top_defaults_to_report_setting(self, capsys) -> None:
        config = PipelineConfig(report=ReportConfig(top_n=1))
        top(self.documents, config, weighting="count")
        out = capsys.readouterr().out
        assert "cat\t1.0000" in out
        assert "dog\t1.0000" in out
        assert "the\t" not in out


class TestMain:
    def test_no_command_prints_help_and_exits(self) -> None:
        with patch.object(sys, "argv", ["textdtm"]):
            with pytest.raises(SystemExit) as exc:
                main()
        assert exc.value.code == 1

    def test_vocab_builtin(self, capsys) -> None:
        with patch.object(sys, "argv", ["textdtm", "vocab", "--builtin", "pets"]):
            main()
        out = capsys.readouterr().out
        assert out.startswith("Vocabulary: ")
        assert "\ncat\n" in out

    @patch("textdtm.cli.top")
    def test_dispatches_top(self, mock_top) -> None:
        argv = ["textdtm", "top", "--builtin", "pets", "--weighting", "relative", "--top", "3"]
        with patch.object(sys, "argv", argv):
            main()
        kwargs = mock_top.call_args[1]
        assert kwargs == {"weighting": "relative", "n": 3}

    def test_top_n_from_environment(self, tmp_path, capsys, monkeypatch) -> None:
        monkeypatch.setenv("REPORT_TOP_N", "1")
        table = tmp_path / "corpus.csv"
        table.write_text("text\nthe cat\nthe dog\n", encoding="utf-8")
        with patch.object(sys, "argv", ["textdtm", "corpus-top", "--table", str(table)]):
            main()
        assert capsys.readouterr().out == "the\t2\n"

    def test_top_flag_overrides_environment(self, tmp_path, capsys, monkeypatch) -> None:
        monkeypatch.setenv("REPORT_TOP_N", "1")
        table = tmp_path / "corpus.csv"
        table.write_text("text\nthe cat\nthe dog\n", encoding="utf-8")
        argv = ["textdtm", "corpus-top", "--table", str(table), "--top", "2"]
        with patch.object(sys, "argv", argv):
            main()
        assert capsys.readouterr().out == "the\t2\ncat\t1\n"

    def test_corpus_top_from_table(self, tmp_path, capsys) -> None:
        table = tmp_path / "corpus.csv"
        table.write_text("text\nthe cat\nthe dog\n", encoding="utf-8")
        argv = ["textdtm", "corpus-top", "--table", str(table), "--top", "1"]
        with patch.object(sys, "argv", argv):
            main()
        assert capsys.readouterr().out == "the\t2\n"

    def test_missing_folder_exits_with_error(self, capsys) -> None:
        argv = ["textdtm", "vocab", "--folder", "/nonexistent/path"]
        with patch.object(sys, "argv", argv):
            with pytest.raises(SystemExit) as exc:
                main()
        assert exc.value.code == 1
        assert "Folder not found" in capsys.readouterr().err

    def test_row_without_id_exits_with_error(self, tmp_path, capsys) -> None:
        table = tmp_path / "corpus.csv"
        table.write_text("text,id\nhello\nworld\n", encoding="utf-8")
        argv = ["textdtm", "vocab", "--table", str(table), "--id-column", "id"]
        with patch.object(sys, "argv", argv):
            with pytest.raises(SystemExit) as exc:
                main()
        assert exc.value.code == 1
        assert "Error: Row 1" in capsys.readouterr().err

    def test_empty_document_exits_with_error(self, tmp_path, capsys) -> None:
        table = tmp_path / "corpus.csv"
        table.write_text("text\nwords\n...\n", encoding="utf-8")
        argv = ["textdtm", "vocab", "--table", str(table)]
        with patch.object(sys, "argv", argv):
            with pytest.raises(SystemExit) as exc:
                main()
        assert exc.value.code == 1
        assert "no tokens" in capsys.readouterr().err

    def test_nan_policy_flag(self, tmp_path, capsys) -> None:
        table = tmp_path / "corpus.csv"
        table.write_text("text\nwords\n...\n", encoding="utf-8")
        argv = ["textdtm", "vocab", "--table", str(table), "--empty", "nan"]
        with patch.object(sys, "argv", argv):
            main()
        assert "words" in capsys.readouterr().out

    def test_invalid_sizes_exit_with_error(self, capsys) -> None:
        argv = ["textdtm", "vocab", "--builtin", "pets", "--policy", "ngram",
                "--n", "1", "--n-min", "2"]
        with patch.object(sys, "argv", argv):
            with pytest.raises(SystemExit) as exc:
                main()
        assert exc.value.code == 1
        assert "Error:" in capsys.readouterr().err
