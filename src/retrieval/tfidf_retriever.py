# src/retrieval/tfidf_retriever.py
"""
TF/IDF Calculator
Relevance score of a query document against the current corpus
"""
import math
from collections import Counter
from typing import Any, Dict, List, NamedTuple, Optional, Sequence

from src.data.preprocessor import ArabicPreprocessor
from src.retrieval.corpus_store import CorpusSnapshot, CorpusStore
from src.utils.errors import require_text
from src.utils.logger import setup_logger

logger = setup_logger("tfidf_retriever")


class TermScore(NamedTuple):
    """Contribution of one distinct query term to the document score."""
    term: str
    count: int
    tf: float
    df: int
    idf: float
    contribution: float


class TFIDFCalculator:
    """
    TF/IDF scorer for Arabic documents.

    score(d) = sum over distinct terms t of tf(t, d) * idf(t) / |d|
    tf(t, d) = count(t, d) / |d|
    idf(t)   = max(0, ln(N / (df(t) + 1))), and 0 when N == 0 or df(t) == 0
    """

    def __init__(self, corpus: Optional[CorpusStore] = None):
        """
        Initialize the calculator.

        Args:
            corpus: Corpus to score against. A new empty one is created when omitted.
        """
        self.corpus = corpus if corpus is not None else CorpusStore()

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None) -> "TFIDFCalculator":
        """
        Build a calculator with an empty corpus from the full app config.

        Args:
            config: Parsed config.yaml contents

        Returns:
            TFIDFCalculator instance
        """
        config = config or {}
        preprocessor = ArabicPreprocessor.from_config(config.get('preprocessing', {}))
        return cls(corpus=CorpusStore(preprocessor=preprocessor))

    @property
    def preprocessor(self) -> ArabicPreprocessor:
        return self.corpus.preprocessor

    def add_document_to_corpus(self, text: str) -> None:
        """
        Append a document to the corpus.

        Args:
            text: Raw document text. None raises InvalidArgumentError.
        """
        self.corpus.add_document(text)

    @staticmethod
    def term_frequencies(tokens: Sequence[str]) -> Dict[str, float]:
        """Length-normalized term frequencies. Empty input gives an empty dict."""
        total = len(tokens)
        if total == 0:
            return {}
        return {term: count / total for term, count in Counter(tokens).items()}

    @staticmethod
    def _idf(df: int, n: int) -> float:
        """
        Smoothed idf. A term found in no document gets 0, so it can rank
        below a rare term that is present.
        """
        if n == 0 or df == 0:
            return 0.0
        # Clamped to 0 once df + 1 >= n
        return max(0.0, math.log(n / (df + 1)))

    def idf(self, term: str) -> float:
        """
        Inverse document frequency of term against the current corpus.

        Args:
            term: Raw term, normalized like document text

        Returns:
            Non-negative, finite idf
        """
        term = self.preprocessor.normalize_term(require_text(term, "term"))
        snapshot = self.corpus.snapshot()
        return self._idf(snapshot.document_frequency(term), snapshot.size)

    def _term_scores(self, tokens: List[str], snapshot: CorpusSnapshot) -> List[TermScore]:
        counts = Counter(tokens)
        total = len(tokens)
        n = snapshot.size

        term_scores = []
        for term, count in counts.items():
            tf = count / total
            df = snapshot.document_frequency(term)
            idf = self._idf(df, n)
            term_scores.append(TermScore(term, count, tf, df, idf, tf * idf / total))
        return term_scores

    def explain(self, text: str) -> List[TermScore]:
        """
        Per-term breakdown of calculate_document_tfidf, in first-seen order.

        The contributions sum to the document score.

        Args:
            text: Raw query text. None raises InvalidArgumentError.

        Returns:
            One TermScore per distinct query term
        """
        text = require_text(text)
        tokens = self.preprocessor.tokenize(text)
        if not tokens:
            return []
        return self._term_scores(tokens, self.corpus.snapshot())

    def calculate_document_tfidf(self, text: str) -> float:
        """
        Score a query document against the corpus as it is right now.

        Args:
            text: Raw query text. None raises InvalidArgumentError.

        Returns:
            Finite, non-negative score. 0.0 when the text has no tokens.
        """
        text = require_text(text)
        tokens = self.preprocessor.tokenize(text)
        if not tokens:
            logger.debug("Query has no tokens, score is 0.0")
            return 0.0

        snapshot = self.corpus.snapshot()
        term_scores = self._term_scores(tokens, snapshot)
        score = sum(ts.contribution for ts in term_scores)

        logger.debug(
            f"Scored {len(tokens)} tokens ({len(term_scores)} distinct) "
            f"against {snapshot.size} documents: {score:.4f}"
        )
        return score
