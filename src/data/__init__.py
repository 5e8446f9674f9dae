"""
Data Module
Load and preprocess Arabic documents
"""

from .preprocessor import ArabicPreprocessor
from .dataloader import CorpusLoader

__all__ = [
    "ArabicPreprocessor",
    "CorpusLoader",
]
