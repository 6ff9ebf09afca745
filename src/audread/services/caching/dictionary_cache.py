"""Dictionary lookup cache storing JSON results."""

import json
import logging
import sqlite3
from typing import Any, Optional

from audread.core import DictionaryCacheEntry
from audread.services.caching.ttl_cache import TtlCacheTable

logger = logging.getLogger(__name__)


class DictionaryCache(TtlCacheTable[DictionaryCacheEntry]):
    """JSON lookup results keyed by ``dictionary_cache_key(term, language)``."""

    TABLE = "dictionary_cache"
    COLUMNS = "key, data, timestamp, ttl_seconds"

    def put_dictionary_cache(
        self, key: str, data: Any, ttl_seconds: Optional[float] = None
    ) -> DictionaryCacheEntry:
        """Store ``data`` under ``key``.

        Raises:
            ValueError: If ``data`` is not JSON-serialisable or ttl is negative.
        """
        self._validate_ttl(ttl_seconds)
        try:
            encoded = json.dumps(data, ensure_ascii=False)
        except TypeError as e:
            raise ValueError(f"Dictionary cache data for {key!r} is not JSON-serialisable: {e}") from e
        entry = DictionaryCacheEntry(key=key, data=data, timestamp=self.clock(), ttl_seconds=ttl_seconds)
        with self.handle.transaction("put_dictionary_cache") as cur:
            cur.execute(
                """
                INSERT OR REPLACE INTO dictionary_cache (key, data, timestamp, ttl_seconds)
                VALUES (?, ?, ?, ?)
                """,
                (entry.key, encoded, entry.timestamp, entry.ttl_seconds),
            )
        logger.debug("Dictionary entry cached: %s", key)
        return entry

    def get_dictionary_cache(self, key: str) -> Optional[Any]:
        """Return the cached data, or None if missing or expired."""
        entry = self.get_entry(key)
        return entry.data if entry else None

    def delete_dictionary_cache(self, key: str) -> None:
        self.delete(key)

    def _row_to_entry(self, row: sqlite3.Row) -> DictionaryCacheEntry:
        return DictionaryCacheEntry(
            key=row["key"],
            data=json.loads(row["data"]),
            timestamp=row["timestamp"],
            ttl_seconds=row["ttl_seconds"],
        )
