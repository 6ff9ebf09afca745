"""I/O layer - SQLite persistence for documents, sentences and settings."""

from .data_store import DataStore
from .document_repository import DocumentRepository
from .sentence_repository import SentenceRepository
from .settings_repository import SettingsRepository
from .store_handle import SCHEMA_VERSION, StoreHandle, StoreState

__all__ = [
    "DataStore",
    "DocumentRepository",
    "SCHEMA_VERSION",
    "SentenceRepository",
    "SettingsRepository",
    "StoreHandle",
    "StoreState",
]
