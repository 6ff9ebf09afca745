"""Text processing services - normalization, fingerprints, keys and import."""

from audread.services.text_processing.cache_keys import audio_cache_key, dictionary_cache_key
from audread.services.text_processing.epub_reader import epub_to_text
from audread.services.text_processing.language_detection import detect_language
from audread.services.text_processing.document_parser import DocumentParser, extract_title, segment_sentences
from audread.services.text_processing.text_normalization import fast_hash, normalize_text

__all__ = [
    "DocumentParser",
    "audio_cache_key",
    "detect_language",
    "dictionary_cache_key",
    "epub_to_text",
    "extract_title",
    "fast_hash",
    "normalize_text",
    "segment_sentences",
]
