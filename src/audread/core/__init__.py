"""Domain layer - Pure entities and rules for documents, settings and caches."""

from .app_settings import SETTINGS_KEY, AppSettings, merge_settings
from .cache_entries import AudioCacheEntry, DictionaryCacheEntry, is_expired
from .document import DocumentMeta, DocumentWithSentences, Sentence
from .exceptions import StoreError, StoreUnavailable, TransactionFailed

__all__ = [
    "AppSettings",
    "AudioCacheEntry",
    "DictionaryCacheEntry",
    "DocumentMeta",
    "DocumentWithSentences",
    "Sentence",
    "SETTINGS_KEY",
    "StoreError",
    "StoreUnavailable",
    "TransactionFailed",
    "is_expired",
    "merge_settings",
]
