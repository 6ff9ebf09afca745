"""TTL cache table abstraction shared by the audio and dictionary caches."""

import logging
import sqlite3
import time
from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional, TypeVar

from audread.core import AudioCacheEntry, DictionaryCacheEntry, is_expired
from audread.io import StoreHandle

logger = logging.getLogger(__name__)

EntryT = TypeVar("EntryT", AudioCacheEntry, DictionaryCacheEntry)

Clock = Callable[[], float]


class TtlCacheTable(ABC, Generic[EntryT]):
    """
    Key/value cache table whose entries may carry a time-to-live.

    Expiry is lazy on reads (an expired entry is deleted and reported as a
    miss) and periodic through CacheSweeper. Writes never evict.

    Subclasses provide the table name, the column list and the row
    conversion.
    """

    TABLE: str = ""
    COLUMNS: str = ""

    def __init__(self, handle: StoreHandle, clock: Optional[Clock] = None) -> None:
        if handle is None:
            raise RuntimeError("StoreHandle required")
        self.handle = handle
        self.clock: Clock = clock or time.time

    @abstractmethod
    def _row_to_entry(self, row: sqlite3.Row) -> EntryT:
        """Convert a database row into a cache entry."""

    def get_entry(self, key: str) -> Optional[EntryT]:
        """Return the live entry for ``key``, deleting it if it has expired."""
        rows = self.handle.read(
            f"get_{self.TABLE}",
            f"SELECT {self.COLUMNS} FROM {self.TABLE} WHERE key = ?",
            (key,),
        )
        if not rows:
            return None
        entry = self._row_to_entry(rows[0])
        if is_expired(entry, self.clock()):
            self.evict_if_unchanged(key, entry.timestamp)
            logger.info("%s entry expired: %s", self.TABLE, key)
            return None
        return entry

    def delete(self, key: str) -> None:
        with self.handle.transaction(f"delete_{self.TABLE}") as cur:
            cur.execute(f"DELETE FROM {self.TABLE} WHERE key = ?", (key,))

    def contains(self, key: str) -> bool:
        """Whether a row exists for ``key``, regardless of expiry."""
        rows = self.handle.read(
            f"contains_{self.TABLE}",
            f"SELECT 1 FROM {self.TABLE} WHERE key = ?",
            (key,),
        )
        return bool(rows)

    def list_keys(self) -> List[str]:
        rows = self.handle.read(
            f"list_{self.TABLE}", f"SELECT key FROM {self.TABLE} ORDER BY key"
        )
        return [row["key"] for row in rows]

    def expired_entries(self, now: float) -> List[EntryT]:
        """Scan every ttl-bearing entry and return those expired at ``now``."""
        rows = self.handle.read(
            f"scan_{self.TABLE}",
            f"SELECT {self.COLUMNS} FROM {self.TABLE} WHERE ttl_seconds IS NOT NULL",
        )
        entries = [self._row_to_entry(row) for row in rows]
        return [entry for entry in entries if is_expired(entry, now)]

    def evict_if_unchanged(self, key: str, timestamp: float) -> bool:
        """Delete ``key`` only if it still has the given write timestamp.

        An entry rewritten after it was found expired has a new timestamp and
        is kept.

        Returns:
            True if a row was deleted.
        """
        with self.handle.transaction(f"evict_{self.TABLE}") as cur:
            cur.execute(
                f"DELETE FROM {self.TABLE} WHERE key = ? AND timestamp = ?",
                (key, timestamp),
            )
            return cur.rowcount > 0

    def evict_all_unchanged(self, entries: List[EntryT]) -> int:
        """Evict a batch of scanned entries in a single transaction."""
        if not entries:
            return 0
        evicted = 0
        with self.handle.transaction(f"sweep_{self.TABLE}") as cur:
            for entry in entries:
                cur.execute(
                    f"DELETE FROM {self.TABLE} WHERE key = ? AND timestamp = ?",
                    (entry.key, entry.timestamp),
                )
                evicted += cur.rowcount
        return evicted

    @staticmethod
    def _validate_ttl(ttl_seconds: Optional[float]) -> None:
        if ttl_seconds is not None and ttl_seconds < 0:
            raise ValueError(f"ttl_seconds must be >= 0, got {ttl_seconds}")
