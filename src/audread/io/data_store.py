"""Facade over the document and sentence repositories used by readers."""

import logging
from dataclasses import replace
from typing import List, Optional

from audread.core import DocumentMeta, DocumentWithSentences, Sentence
from audread.io.document_repository import DocumentRepository
from audread.io.sentence_repository import SentenceRepository, validate_sentences
from audread.io.store_handle import StoreHandle

logger = logging.getLogger(__name__)


class DataStore:
    """Narrow interface for listing, opening and saving documents.

    Only two defaults are applied here: ``get_doc`` returns None for an
    unknown id and an empty sentence list for a document without sentences.
    Storage failures propagate as TransactionFailed / StoreUnavailable.
    """

    def __init__(
        self,
        handle: StoreHandle,
        documents: Optional[DocumentRepository] = None,
        sentences: Optional[SentenceRepository] = None,
    ) -> None:
        if handle is None:
            raise RuntimeError("StoreHandle required")
        self.handle = handle
        self.documents = documents or DocumentRepository(handle)
        self.sentences = sentences or SentenceRepository(handle)

    def list_docs(self) -> List[DocumentMeta]:
        return self.documents.list_documents()

    def save_doc(self, meta: DocumentMeta) -> None:
        self.documents.save_document(meta)

    def get_doc(self, doc_id: str) -> Optional[DocumentWithSentences]:
        """Return the document joined with its sentences, or None if unknown."""
        meta = self.documents.get_document(doc_id)
        if meta is None:
            return None
        return DocumentWithSentences(meta=meta, sentences=self.sentences.get_sentences(doc_id))

    def save_sentences(self, doc_id: str, sentences: List[Sentence]) -> None:
        self.sentences.save_sentences(doc_id, sentences)

    def get_sentences(self, doc_id: str) -> List[Sentence]:
        return self.sentences.get_sentences(doc_id)

    def import_document(self, document: DocumentWithSentences) -> DocumentMeta:
        """Save a freshly parsed document and its sentences atomically.

        ``sentence_count`` is set from the sentence list.

        Returns:
            The stored document metadata.
        """
        meta = replace(document.meta, sentence_count=len(document.sentences))
        validate_sentences(meta.id, document.sentences)
        with self.handle.transaction("import_document") as cur:
            DocumentRepository.upsert(cur, meta)
            SentenceRepository.replace(cur, meta.id, document.sentences)
        logger.info("Imported document %s (%d sentences)", meta.id, len(document.sentences))
        return meta

    def delete_doc(self, doc_id: str) -> None:
        """Delete a document together with all of its sentences."""
        with self.handle.transaction("delete_doc") as cur:
            SentenceRepository.delete_for_document(cur, doc_id)
            DocumentRepository.delete(cur, doc_id)
        logger.info("Document and sentences deleted: %s", doc_id)
