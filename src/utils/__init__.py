"""
Utilities Module
Helper functions and utilities
"""
from .errors import InvalidArgumentError, require_text
from .logger import set_log_level, setup_logger
from .text_utils import normalize_arabic, normalize_text, split_letter_runs, tokenize_arabic

__all__ = [
    "InvalidArgumentError",
    "require_text",
    "set_log_level",
    "setup_logger",
    "normalize_arabic",
    "normalize_text",
    "split_letter_runs",
    "tokenize_arabic",
]
