"""Caching services - TTL cache tables and the expiry sweeper."""

from audread.services.caching.audio_cache import AudioCache
from audread.services.caching.dictionary_cache import DictionaryCache
from audread.services.caching.sweeper import DEFAULT_SWEEP_INTERVAL_SECONDS, CacheSweeper
from audread.services.caching.ttl_cache import TtlCacheTable

__all__ = [
    "AudioCache",
    "CacheSweeper",
    "DEFAULT_SWEEP_INTERVAL_SECONDS",
    "DictionaryCache",
    "TtlCacheTable",
]
