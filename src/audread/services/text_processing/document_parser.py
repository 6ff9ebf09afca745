"""Import of text files into documents segmented into sentences."""

import logging
import re
import secrets
import time
import zipfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional

from audread.core import DocumentMeta, DocumentWithSentences, Sentence
from audread.services.text_processing.epub_reader import epub_to_text
from audread.services.text_processing.language_detection import detect_language
from audread.services.text_processing.text_normalization import fast_hash

logger = logging.getLogger(__name__)

MIN_SENTENCE_LENGTH = 10
MAX_TITLE_LINE_LENGTH = 100
UNTITLED = "Untitled Document"
PDF_PLACEHOLDER = (
    "PDF parsing is not yet implemented. "
    "Please convert your PDF to text format and upload again."
)

_SENTENCE_BOUNDARY = re.compile(r'(?<=[.!?])\s+(?=[A-Z])')


def segment_sentences(text: str) -> List[str]:
    """
    Split text on sentence-ending punctuation.

    A boundary is ``.``, ``!`` or ``?`` followed by whitespace and an
    upper-case letter. Fragments of 10 characters or fewer are dropped.
    """
    cleaned = re.sub(r'\s+', ' ', text).strip()
    if not cleaned:
        return []
    parts = (part.strip() for part in _SENTENCE_BOUNDARY.split(cleaned))
    return [part for part in parts if len(part) > MIN_SENTENCE_LENGTH]


def extract_title(filename: str, content: Optional[str] = None) -> str:
    """Derive a display title from the file name, else the first content line."""
    stem = re.sub(r'\.[^/.]+$', '', filename)
    cleaned = re.sub(r'\s+', ' ', re.sub(r'[_-]', ' ', stem)).strip()
    if cleaned:
        return cleaned[0].upper() + cleaned[1:]

    if content:
        first_line = content.split("\n")[0].strip()
        if 0 < len(first_line) < MAX_TITLE_LINE_LENGTH:
            return first_line

    return UNTITLED


class DocumentParser:
    """Turns imported files into documents ready for DataStore.import_document.

    Args:
        clock: Returns epoch seconds; used for ids and ``created_at``.
        token: Returns the random suffix of new document ids.
    """

    def __init__(
        self,
        clock: Optional[Callable[[], float]] = None,
        token: Optional[Callable[[], str]] = None,
    ) -> None:
        self.clock = clock or time.time
        self.token = token or (lambda: secrets.token_hex(5))

    def parse_file(self, path: Path) -> DocumentWithSentences:
        """Parse a file, choosing the reader from its extension.

        Raises:
            RuntimeError: If the file cannot be read.
        """
        path = Path(path)
        extension = path.suffix.lower().lstrip(".")
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise RuntimeError(f"Failed to read {path}: {e}") from e

        if extension == "pdf":
            return self.parse_pdf(path.name)
        if extension == "epub":
            return self.parse_epub(raw, path.name)
        return self.parse_text(raw.decode("utf-8", errors="replace"), path.name)

    def parse_text(self, content: str, filename: str, language: Optional[str] = None) -> DocumentWithSentences:
        """Parse plain text; the language is detected when not given."""
        language = language or detect_language(content)
        return self._build(extract_title(filename, content), segment_sentences(content), language)

    def parse_epub(self, raw: bytes, filename: str) -> DocumentWithSentences:
        """Parse the content documents of an EPUB archive in spine order.

        Data that is not a zip archive is imported as plain text.
        """
        try:
            text = epub_to_text(raw)
        except zipfile.BadZipFile:
            logger.warning("%s is not a valid EPUB archive, importing as text", filename)
            return self.parse_text(raw.decode("utf-8", errors="replace"), filename)
        return self._build(extract_title(filename, text), segment_sentences(text), detect_language(text))

    def parse_pdf(self, filename: str) -> DocumentWithSentences:
        logger.warning("PDF import is not supported, storing placeholder for %s", filename)
        return self._build(
            f"{extract_title(filename)} (PDF - Convert to text first)", [PDF_PLACEHOLDER], None
        )

    def _build(self, title: str, texts: List[str], language: Optional[str]) -> DocumentWithSentences:
        now = self.clock()
        doc_id = f"doc_{int(now * 1000)}_{self.token()}"
        sentences = [
            Sentence(id=f"s_{index}", doc_id=doc_id, text=text, index=index, hash=fast_hash(text))
            for index, text in enumerate(texts)
        ]
        meta = DocumentMeta(
            id=doc_id,
            title=title,
            created_at=datetime.fromtimestamp(now, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
            language=language,
            sentence_count=len(sentences),
        )
        logger.info("Parsed %r into %d sentences", title, len(sentences))
        return DocumentWithSentences(meta=meta, sentences=sentences)
