"""Tests for the append-only corpus store."""
import threading

import pytest

from src.data.preprocessor import ArabicPreprocessor
from src.retrieval.corpus_store import CorpusStore, Document
from src.utils.errors import InvalidArgumentError


class TestCorpusStore:
    def test_starts_empty(self, store):
        assert store.document_count() == 0
        assert len(store) == 0
        assert store.document_frequency("كتاب") == 0

    def test_add_document_grows_by_one(self, store):
        store.add_document("كتاب")
        store.add_document("قلم")
        assert store.document_count() == 2
        assert store.documents[0] == Document(tokens=("كتاب",))

    def test_empty_documents_are_counted(self, store):
        store.add_document("")
        store.add_document("123 !!!")
        assert store.document_count() == 2
        assert store.documents[1].tokens == ()

    def test_df_counts_each_document_once(self, store):
        store.add_document("التعليم التعليم مهم")
        store.add_document("التعليم نور")
        store.add_document("العلم نور")
        assert store.document_frequency("التعليم") == 2
        assert store.document_frequency("نور") == 2
        assert store.document_frequency("مهم") == 1
        assert store.document_frequency("غائب") == 0

    def test_df_lookup_is_normalized(self, store):
        store.add_document("أصدقاء")
        assert store.document_frequency("اصدقاء") == 1
        assert store.document_frequency("أَصْدِقَاء") == 1
        assert store.document_frequency("!!!") == 0

    def test_none_is_rejected(self, store):
        with pytest.raises(InvalidArgumentError):
            store.add_document(None)
        assert store.document_count() == 0

    def test_add_documents(self, store):
        assert store.add_documents(["كتاب", "قلم", "دفتر"]) == 3
        assert store.document_count() == 3

    def test_add_documents_publishes_one_snapshot(self, store):
        store.add_document("كتاب")
        before = store.snapshot()
        store.add_documents(["كتاب قلم", "قلم", ""])
        assert before.size == 1
        assert store.document_count() == 4
        assert store.document_frequency("كتاب") == 2
        assert store.document_frequency("قلم") == 2
        assert [d.tokens for d in store.documents] == [("كتاب",), ("كتاب", "قلم"), ("قلم",), ()]

    def test_add_documents_rejects_batch_with_none(self, store):
        with pytest.raises(InvalidArgumentError):
            store.add_documents(["كتاب", None])
        assert store.document_count() == 0

    def test_snapshot_is_not_affected_by_later_appends(self, store):
        store.add_document("كتاب")
        snapshot = store.snapshot()
        store.add_document("كتاب قلم")
        assert snapshot.size == 1
        assert snapshot.document_frequency("كتاب") == 1
        assert store.snapshot().document_frequency("كتاب") == 2

    def test_snapshot_doc_freq_is_read_only(self, store):
        store.add_document("كتاب")
        with pytest.raises(TypeError):
            store.snapshot().doc_freq["كتاب"] = 5

    def test_custom_preprocessor(self):
        store = CorpusStore(preprocessor=ArabicPreprocessor(fold_alef=False))
        store.add_document("أصدقاء")
        assert store.documents[0].tokens == ("أصدقاء",)

    def test_concurrent_appends_keep_counts(self, store):
        def worker():
            for _ in range(50):
                store.add_document("وثيقة مشتركة")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert store.document_count() == 400
        assert store.document_frequency("وثيقة") == 400
