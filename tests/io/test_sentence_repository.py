"""Tests for SentenceRepository - replace-all sentence persistence."""

import sqlite3
from unittest.mock import patch

import pytest

from audread.core import Sentence, TransactionFailed
from audread.io import SentenceRepository


@pytest.fixture
def sentences(handle):
    return SentenceRepository(handle)


def make_sentences(doc_id, texts):
    return [
        Sentence(id=f"s{i}", doc_id=doc_id, text=text, index=i, hash=f"h{i}")
        for i, text in enumerate(texts)
    ]


class TestSaveSentences:
    def test_get_returns_saved_sentences_in_index_order(self, sentences):
        saved = make_sentences("doc_1", ["One.", "Two.", "Three."])
        sentences.save_sentences("doc_1", list(reversed(saved)))
        assert sentences.get_sentences("doc_1") == saved

    def test_save_twice_is_idempotent(self, sentences):
        saved = make_sentences("doc_1", ["One.", "Two."])
        sentences.save_sentences("doc_1", saved)
        sentences.save_sentences("doc_1", saved)
        assert sentences.get_sentences("doc_1") == saved

    def test_replace_leaves_no_residual_rows(self, sentences):
        sentences.save_sentences("doc_1", make_sentences("doc_1", ["a", "b", "c", "d"]))
        replacement = make_sentences("doc_1", ["x", "y"])
        sentences.save_sentences("doc_1", replacement)
        assert sentences.get_sentences("doc_1") == replacement

    def test_other_documents_are_untouched(self, sentences):
        first = make_sentences("doc_1", ["a", "b"])
        second = make_sentences("doc_2", ["c"])
        sentences.save_sentences("doc_1", first)
        sentences.save_sentences("doc_2", second)
        sentences.save_sentences("doc_1", [])

        assert sentences.get_sentences("doc_1") == []
        assert sentences.get_sentences("doc_2") == second

    def test_same_sentence_ids_in_different_documents(self, sentences):
        first = make_sentences("doc_1", ["a"])
        second = make_sentences("doc_2", ["b"])
        sentences.save_sentences("doc_1", first)
        sentences.save_sentences("doc_2", second)
        assert sentences.get_sentences("doc_1") == first
        assert sentences.get_sentences("doc_2") == second

    def test_rejects_sentence_of_another_document(self, sentences):
        with pytest.raises(ValueError, match="belongs to"):
            sentences.save_sentences("doc_1", make_sentences("doc_2", ["a"]))

    def test_rejects_duplicate_indices(self, sentences):
        dup = [Sentence("s0", "doc_1", "a", 0, "h"), Sentence("s1", "doc_1", "b", 0, "h")]
        with pytest.raises(ValueError, match="contiguous"):
            sentences.save_sentences("doc_1", dup)

    def test_rejects_gaps_in_indices(self, sentences):
        gap = [Sentence("s0", "doc_1", "a", 0, "h"), Sentence("s2", "doc_1", "c", 2, "h")]
        with pytest.raises(ValueError, match="contiguous"):
            sentences.save_sentences("doc_1", gap)

    def test_failed_insert_keeps_previous_sentences(self, sentences):
        original = make_sentences("doc_1", ["a", "b"])
        sentences.save_sentences("doc_1", original)

        # Two rows with the same primary key abort the insert half-way.
        clash = [Sentence("s0", "doc_1", "x", 0, "h"), Sentence("s0", "doc_1", "y", 1, "h")]
        with pytest.raises(TransactionFailed):
            sentences.save_sentences("doc_1", clash)

        assert sentences.get_sentences("doc_1") == original

    def test_failure_after_delete_is_rolled_back(self, sentences):
        original = make_sentences("doc_1", ["a", "b"])
        sentences.save_sentences("doc_1", original)

        real_delete = SentenceRepository.delete_for_document

        def delete_then_fail(cur, doc_id):
            real_delete(cur, doc_id)
            raise sqlite3.OperationalError("database or disk is full")

        with patch.object(SentenceRepository, "delete_for_document", side_effect=delete_then_fail):
            with pytest.raises(TransactionFailed):
                sentences.save_sentences("doc_1", make_sentences("doc_1", ["z"]))

        assert sentences.get_sentences("doc_1") == original


class TestGetAndDelete:
    def test_unknown_document_has_no_sentences(self, sentences):
        assert sentences.get_sentences("missing") == []

    def test_delete_sentences(self, sentences):
        sentences.save_sentences("doc_1", make_sentences("doc_1", ["a", "b"]))
        sentences.delete_sentences("doc_1")
        assert sentences.get_sentences("doc_1") == []
