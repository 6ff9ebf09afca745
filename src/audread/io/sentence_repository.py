"""Data access layer for document sentences."""

import logging
import sqlite3
from typing import List, Sequence

from audread.core import Sentence
from audread.io.store_handle import StoreHandle

logger = logging.getLogger(__name__)


def validate_sentences(doc_id: str, sentences: Sequence[Sentence]) -> None:
    """Check that the sentences form one document's complete ordering.

    Raises:
        ValueError: If a sentence belongs to another document, or if the
            indices are not unique and contiguous from 0.
    """
    for sentence in sentences:
        if sentence.doc_id != doc_id:
            raise ValueError(
                f"Sentence {sentence.id!r} belongs to {sentence.doc_id!r}, not {doc_id!r}"
            )
    indices = sorted(sentence.index for sentence in sentences)
    if indices != list(range(len(sentences))):
        raise ValueError(f"Sentence indices for {doc_id!r} must be unique and contiguous from 0")


class SentenceRepository:
    """Stores the ordered sentences of each document.

    Sentences are only ever replaced as a whole: ``save_sentences`` deletes
    and re-inserts every row of a document inside one transaction, so readers
    see either the old list or the new one.
    """

    def __init__(self, handle: StoreHandle) -> None:
        if handle is None:
            raise RuntimeError("StoreHandle required")
        self.handle = handle

    def save_sentences(self, doc_id: str, sentences: Sequence[Sentence]) -> None:
        """Replace all sentences of ``doc_id`` with ``sentences``.

        Raises:
            ValueError: If the sentences are inconsistent (nothing is written).
            TransactionFailed: If the write aborts (previous rows are kept).
        """
        validate_sentences(doc_id, sentences)
        with self.handle.transaction("save_sentences") as cur:
            self.replace(cur, doc_id, sentences)
        logger.info("Sentences saved for document %s, count: %d", doc_id, len(sentences))

    def get_sentences(self, doc_id: str) -> List[Sentence]:
        """Return the sentences of ``doc_id`` ordered by index (empty if none)."""
        rows = self.handle.read(
            "get_sentences",
            """
            SELECT id, doc_id, text, idx, hash
            FROM sentences
            WHERE doc_id = ?
            ORDER BY idx ASC
            """,
            (doc_id,),
        )
        return [self._row_to_sentence(row) for row in rows]

    def delete_sentences(self, doc_id: str) -> None:
        with self.handle.transaction("delete_sentences") as cur:
            self.delete_for_document(cur, doc_id)
        logger.info("Sentences deleted for document %s", doc_id)

    @classmethod
    def replace(cls, cur: sqlite3.Cursor, doc_id: str, sentences: Sequence[Sentence]) -> None:
        cls.delete_for_document(cur, doc_id)
        cur.executemany(
            """
            INSERT INTO sentences (doc_id, id, text, idx, hash)
            VALUES (?, ?, ?, ?, ?)
            """,
            [(doc_id, s.id, s.text, s.index, s.hash) for s in sentences],
        )

    @staticmethod
    def delete_for_document(cur: sqlite3.Cursor, doc_id: str) -> None:
        cur.execute("DELETE FROM sentences WHERE doc_id = ?", (doc_id,))

    @staticmethod
    def _row_to_sentence(row: sqlite3.Row) -> Sentence:
        return Sentence(
            id=row["id"],
            doc_id=row["doc_id"],
            text=row["text"],
            index=row["idx"],
            hash=row["hash"],
        )
