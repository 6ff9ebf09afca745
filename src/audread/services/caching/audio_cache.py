"""Audio cache for synthesized sentence speech."""

import logging
import sqlite3
from typing import Optional

from audread.core import AudioCacheEntry
from audread.services.caching.ttl_cache import TtlCacheTable

logger = logging.getLogger(__name__)


class AudioCache(TtlCacheTable[AudioCacheEntry]):
    """Binary audio payloads keyed by ``audio_cache_key(text, voice)``.

    Entries are immutable: a re-fetch overwrites the whole row and restarts
    its ttl.
    """

    TABLE = "audio_cache"
    COLUMNS = "key, payload, content_type, timestamp, ttl_seconds"

    def put_audio(
        self,
        key: str,
        payload: bytes,
        content_type: str,
        ttl_seconds: Optional[float] = None,
    ) -> AudioCacheEntry:
        self._validate_ttl(ttl_seconds)
        entry = AudioCacheEntry(
            key=key,
            payload=bytes(payload),
            content_type=content_type,
            timestamp=self.clock(),
            ttl_seconds=ttl_seconds,
        )
        with self.handle.transaction("put_audio") as cur:
            cur.execute(
                """
                INSERT OR REPLACE INTO audio_cache (key, payload, content_type, timestamp, ttl_seconds)
                VALUES (?, ?, ?, ?, ?)
                """,
                (entry.key, sqlite3.Binary(entry.payload), entry.content_type, entry.timestamp, entry.ttl_seconds),
            )
        logger.debug("Audio cached: %s (%d bytes)", key, len(entry.payload))
        return entry

    def get_audio(self, key: str) -> Optional[bytes]:
        """Return the cached payload, or None if missing or expired."""
        entry = self.get_entry(key)
        return entry.payload if entry else None

    def get_audio_entry(self, key: str) -> Optional[AudioCacheEntry]:
        return self.get_entry(key)

    def delete_audio(self, key: str) -> None:
        self.delete(key)

    def _row_to_entry(self, row: sqlite3.Row) -> AudioCacheEntry:
        return AudioCacheEntry(
            key=row["key"],
            payload=bytes(row["payload"]),
            content_type=row["content_type"],
            timestamp=row["timestamp"],
            ttl_seconds=row["ttl_seconds"],
        )
