"""
Retrieval Module
Corpus store and TF/IDF scoring
"""
from .corpus_store import CorpusStore, CorpusSnapshot, Document
from .tfidf_retriever import TFIDFCalculator, TermScore

__all__ = [
    "CorpusStore",
    "CorpusSnapshot",
    "Document",
    "TFIDFCalculator",
    "TermScore",
]
