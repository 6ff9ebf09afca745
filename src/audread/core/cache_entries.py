"""Cache entities and the expiry rule shared by reads and the sweeper."""

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class AudioCacheEntry:
    key: str
    payload: bytes
    content_type: str
    timestamp: float
    ttl_seconds: Optional[float] = None


@dataclass(frozen=True)
class DictionaryCacheEntry:
    key: str
    data: Any
    timestamp: float
    ttl_seconds: Optional[float] = None


CacheEntry = Union[AudioCacheEntry, DictionaryCacheEntry]


def is_expired(entry: CacheEntry, now: float) -> bool:
    """
    Return True when the entry carries a ttl and is older than it.

    Entries without a ttl never expire. An entry exactly ``ttl_seconds`` old
    is still served.

    Args:
        entry: Audio or dictionary cache entry.
        now: Current time in epoch seconds.
    """
    if entry.ttl_seconds is None:
        return False
    return (now - entry.timestamp) > entry.ttl_seconds
