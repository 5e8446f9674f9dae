"""Tests for the command-line entry point."""
import json
import logging

import pytest

from main import build_calculator, main
from src.utils.logger import set_log_level


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / "corpus.json"
    path.write_text(json.dumps(["كتاب", "قلم", "دفتر"], ensure_ascii=False), encoding="utf-8")
    return str(path)


def test_build_calculator_loads_corpus(corpus_file):
    calculator = build_calculator({}, corpus_file)
    assert calculator.corpus.document_count() == 3


def test_build_calculator_without_corpus():
    calculator = build_calculator({})
    assert calculator.corpus.document_count() == 0


def test_main_prints_scores(corpus_file, capsys):
    assert main(["--corpus", corpus_file, "--query", "كتاب", "--explain"]) == 0
    out = capsys.readouterr().out
    assert "0.4055\tكتاب" in out
    assert "df=1" in out


def test_main_requires_query(corpus_file):
    assert main(["--corpus", corpus_file]) == 2


def test_main_missing_corpus(tmp_path):
    assert main(["--corpus", str(tmp_path / "missing.txt"), "--query", "كتاب"]) == 1


@pytest.fixture
def restore_log_level():
    yield
    set_log_level("INFO")


def test_main_applies_config_log_level(corpus_file, tmp_path, restore_log_level):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("logging:\n  level: DEBUG\n", encoding="utf-8")
    assert main(["--config", str(config_path), "--corpus", corpus_file, "--query", "كتاب"]) == 0
    for name in ("main", "corpus_store", "tfidf_retriever", "dataloader", "preprocessor"):
        assert logging.getLogger(name).level == logging.DEBUG
