# src/retrieval/corpus_store.py
"""
Corpus Store
Append-only document collection with document-frequency bookkeeping.
"""
import threading
from collections import Counter
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, NamedTuple, Optional, Tuple

from src.data.preprocessor import ArabicPreprocessor
from src.utils.errors import require_text
from src.utils.logger import setup_logger

logger = setup_logger("corpus_store")


class Document(NamedTuple):
    """Tokenized document. Token order and duplicates are preserved."""
    tokens: Tuple[str, ...]

    @property
    def terms(self) -> FrozenSet[str]:
        return frozenset(self.tokens)


class CorpusSnapshot(NamedTuple):
    """Immutable view of the corpus at one point in time."""
    documents: Tuple[Document, ...]
    doc_freq: Mapping[str, int]

    @property
    def size(self) -> int:
        return len(self.documents)

    def document_frequency(self, term: str) -> int:
        return self.doc_freq.get(term, 0)


EMPTY_SNAPSHOT = CorpusSnapshot(documents=(), doc_freq=MappingProxyType({}))


class CorpusStore:
    """
    Ordered, append-only collection of reference documents.

    Every append publishes a new CorpusSnapshot under a lock, so readers
    holding an older snapshot never see a partially applied append.
    """

    def __init__(self, preprocessor: Optional[ArabicPreprocessor] = None):
        """
        Initialize an empty corpus.

        Args:
            preprocessor: Tokenizer used for documents and term lookups.
        """
        self.preprocessor = preprocessor or ArabicPreprocessor()
        self._snapshot = EMPTY_SNAPSHOT
        self._write_lock = threading.Lock()

    def add_document(self, text: str) -> None:
        """
        Tokenize text and append it, even when it yields no tokens.

        Args:
            text: Raw document text. None raises InvalidArgumentError.
        """
        text = require_text(text)
        document = Document(tokens=tuple(self.preprocessor.tokenize(text)))

        with self._write_lock:
            current = self._snapshot
            doc_freq = Counter(current.doc_freq)
            doc_freq.update(document.terms)
            self._snapshot = CorpusSnapshot(
                documents=current.documents + (document,),
                doc_freq=MappingProxyType(dict(doc_freq)),
            )
            size = len(self._snapshot.documents)

        logger.debug(f"Added document #{size} with {len(document.tokens)} tokens")

    def add_documents(self, texts: Iterable[str]) -> int:
        """
        Append several documents in order as one snapshot.

        Every text is validated before anything is published, so a None in
        the batch leaves the corpus unchanged.

        Args:
            texts: Iterable of raw document texts

        Returns:
            Number of documents appended
        """
        documents = [
            Document(tokens=tuple(self.preprocessor.tokenize(require_text(text))))
            for text in texts
        ]
        count = len(documents)

        with self._write_lock:
            current = self._snapshot
            doc_freq = Counter(current.doc_freq)
            for document in documents:
                doc_freq.update(document.terms)
            self._snapshot = CorpusSnapshot(
                documents=current.documents + tuple(documents),
                doc_freq=MappingProxyType(dict(doc_freq)),
            )
        logger.info(f"Added {count} documents. Corpus size: {self.document_count()}")
        return count

    def snapshot(self) -> CorpusSnapshot:
        "Current immutable corpus state"
        return self._snapshot

    @property
    def documents(self) -> Tuple[Document, ...]:
        return self._snapshot.documents

    def document_count(self) -> int:
        return self._snapshot.size

    def document_frequency(self, term: str) -> int:
        """
        Number of documents containing term at least once.

        Args:
            term: Raw term. It is normalized like document text before lookup.

        Returns:
            Document frequency, 0 for an empty corpus or an unseen term
        """
        term = self.preprocessor.normalize_term(require_text(term, "term"))
        if not term:
            return 0
        return self._snapshot.document_frequency(term)

    def __len__(self) -> int:
        return self.document_count()
