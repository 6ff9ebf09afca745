"""
AudRead - local document store for a reading and listening companion.

This package provides the persistence layer behind the reader:
- Imported documents segmented into ordered sentences
- User settings with per-group merging
- Audio (text-to-speech) and dictionary caches with time-to-live expiry
"""

__version__ = "0.1.0"

# Make key components available at package level
from audread.core import DocumentMeta, DocumentWithSentences, Sentence
from audread.io import DataStore, StoreHandle

__all__ = [
    "DataStore",
    "DocumentMeta",
    "DocumentWithSentences",
    "Sentence",
    "StoreHandle",
]
