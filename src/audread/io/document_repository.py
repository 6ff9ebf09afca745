"""Data access layer for document metadata."""

import logging
import sqlite3
from typing import List, Optional

from audread.core import DocumentMeta
from audread.io.store_handle import StoreHandle

logger = logging.getLogger(__name__)


class DocumentRepository:
    """Manages persistence of document metadata.

    Lookups of unknown ids return None; storage failures raise
    TransactionFailed and are never reported as "not found".
    """

    def __init__(self, handle: StoreHandle) -> None:
        if handle is None:
            raise RuntimeError("StoreHandle required")
        self.handle = handle

    def list_documents(self) -> List[DocumentMeta]:
        """Return all documents, oldest import first (ties broken by id)."""
        rows = self.handle.read(
            "list_documents",
            """
            SELECT id, title, language, created_at, sentence_count
            FROM documents
            ORDER BY created_at ASC, id ASC
            """,
        )
        return [self._row_to_document(row) for row in rows]

    def save_document(self, meta: DocumentMeta) -> None:
        """Insert the document or overwrite the existing one with the same id."""
        with self.handle.transaction("save_document") as cur:
            self.upsert(cur, meta)
        logger.info("Document saved: %s", meta.id)

    def get_document(self, doc_id: str) -> Optional[DocumentMeta]:
        rows = self.handle.read(
            "get_document",
            """
            SELECT id, title, language, created_at, sentence_count
            FROM documents
            WHERE id = ?
            """,
            (doc_id,),
        )
        return self._row_to_document(rows[0]) if rows else None

    def delete_document(self, doc_id: str) -> None:
        """Remove the document row only; its sentences are left in place.

        Use DataStore.delete_doc for the cascading delete.
        """
        with self.handle.transaction("delete_document") as cur:
            self.delete(cur, doc_id)
        logger.info("Document deleted: %s", doc_id)

    @staticmethod
    def upsert(cur: sqlite3.Cursor, meta: DocumentMeta) -> None:
        cur.execute(
            """
            INSERT INTO documents (id, title, language, created_at, sentence_count)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                title = excluded.title,
                language = excluded.language,
                created_at = excluded.created_at,
                sentence_count = excluded.sentence_count
            """,
            (meta.id, meta.title, meta.language, meta.created_at, meta.sentence_count),
        )

    @staticmethod
    def delete(cur: sqlite3.Cursor, doc_id: str) -> None:
        cur.execute("DELETE FROM documents WHERE id = ?", (doc_id,))

    @staticmethod
    def _row_to_document(row: sqlite3.Row) -> DocumentMeta:
        return DocumentMeta(
            id=row["id"],
            title=row["title"],
            created_at=row["created_at"],
            language=row["language"],
            sentence_count=row["sentence_count"],
        )
