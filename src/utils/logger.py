# src/utils/logger.py
"""
Logger Module
Logging utilities
"""
import logging
import os
import sys

DEFAULT_LEVEL_ENV = "ARABIC_TFIDF_LOG_LEVEL"

# Names of every logger created through setup_logger
_project_loggers = set()


def _resolve_level(level) -> int:
    if level is None:
        level = os.environ.get(DEFAULT_LEVEL_ENV, "INFO")
    return getattr(logging, str(level).upper(), logging.INFO)


def setup_logger(name: str = "arabic_tfidf", level: str = None):
    """
    Setup logger for the project.

    Args:
        name: Logger name
        level: Logging level. Falls back to $ARABIC_TFIDF_LOG_LEVEL, then INFO.

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    _project_loggers.add(name)

    log_level = _resolve_level(level)
    logger.setLevel(log_level)

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
    else:
        for handler in logger.handlers:
            handler.setLevel(log_level)
    return logger


def set_log_level(level: str):
    """
    Apply one level to every logger created by setup_logger.

    Args:
        level: Logging level name, e.g. "DEBUG"
    """
    for name in sorted(_project_loggers):
        setup_logger(name, level)
