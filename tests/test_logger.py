"""Tests for project logger setup."""
import logging

from src.utils.logger import set_log_level, setup_logger


def test_setup_logger_single_handler():
    logger = setup_logger("logger_test_single", "WARNING")
    setup_logger("logger_test_single", "WARNING")
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_set_log_level_reaches_every_project_logger():
    first = setup_logger("logger_test_a", "INFO")
    second = setup_logger("logger_test_b", "INFO")
    try:
        set_log_level("DEBUG")
        assert first.level == logging.DEBUG
        assert second.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in second.handlers)
    finally:
        set_log_level("INFO")


def test_env_level_default(monkeypatch):
    monkeypatch.setenv("ARABIC_TFIDF_LOG_LEVEL", "ERROR")
    assert setup_logger("logger_test_env").level == logging.ERROR
