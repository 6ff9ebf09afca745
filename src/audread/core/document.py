"""Domain entities for imported documents and their sentences."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class DocumentMeta:
    """Metadata of an imported text.

    Attributes:
        id: Stable unique identifier (e.g. ``doc_1700000000000_k3j2``).
        title: Display title, editable by re-saving.
        created_at: ISO-8601 timestamp of the import.
        language: Optional language code.
        sentence_count: Number of sentences saved with the document, if known.
    """

    id: str
    title: str
    created_at: str
    language: Optional[str] = None
    sentence_count: Optional[int] = None


@dataclass
class Sentence:
    """One ordered unit of a document's text."""

    id: str
    doc_id: str
    text: str
    index: int
    hash: str


@dataclass
class DocumentWithSentences:
    meta: DocumentMeta
    sentences: List[Sentence] = field(default_factory=list)
