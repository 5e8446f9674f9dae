"""Shared fixtures for the TF-IDF tests."""
import pytest

from src.retrieval.corpus_store import CorpusStore
from src.retrieval.tfidf_retriever import TFIDFCalculator


@pytest.fixture
def calculator() -> TFIDFCalculator:
    return TFIDFCalculator()


@pytest.fixture
def cat_corpus_calculator() -> TFIDFCalculator:
    calc = TFIDFCalculator()
    calc.add_document_to_corpus("القطة تجلس على السجادة")
    calc.add_document_to_corpus("الكلب يلعب في الحديقة")
    calc.add_document_to_corpus("القطة والكلب أصدقاء")
    return calc


@pytest.fixture
def store() -> CorpusStore:
    return CorpusStore()
