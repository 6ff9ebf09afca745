"""Periodic eviction of expired audio and dictionary cache entries."""

import logging
from typing import Optional, Sequence

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from audread.core import StoreError
from audread.services.caching.ttl_cache import Clock, TtlCacheTable

logger = logging.getLogger(__name__)

DEFAULT_SWEEP_INTERVAL_SECONDS = 60 * 60


class CacheSweeper(QObject):
    """
    Reaps expired cache entries on a fixed Qt timer.

    ``start()`` sweeps once immediately and then every ``interval_seconds``
    on the application event loop. Each pass captures ``now`` once, scans the
    caches and deletes an entry only if it still carries the timestamp that
    was scanned, so entries rewritten during the pass survive it. A pass
    requested while another is running is skipped.
    """

    sweep_finished = Signal(int)
    sweep_failed = Signal(str)

    def __init__(
        self,
        caches: Sequence[TtlCacheTable],
        interval_seconds: int = DEFAULT_SWEEP_INTERVAL_SECONDS,
        clock: Optional[Clock] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        if not caches:
            raise ValueError("CacheSweeper needs at least one cache")
        if interval_seconds <= 0:
            raise ValueError(f"Sweep interval must be positive, got {interval_seconds}")

        self.caches = list(caches)
        self.interval_seconds = interval_seconds
        self.clock = clock or caches[0].clock
        self._sweeping = False

        self._timer = QTimer(self)
        self._timer.setInterval(interval_seconds * 1000)
        self._timer.timeout.connect(self.sweep)

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    @property
    def is_sweeping(self) -> bool:
        return self._sweeping

    def start(self) -> None:
        """Sweep now, then on every timer tick."""
        self.sweep()
        self._timer.start()
        logger.info("Cache sweeper started (every %ds)", self.interval_seconds)

    def stop(self) -> None:
        self._timer.stop()
        logger.info("Cache sweeper stopped")

    @Slot()
    def sweep(self) -> int:
        """Run one pass over every cache.

        Returns:
            Number of entries evicted (0 when the pass was skipped or failed).
        """
        if self._sweeping:
            logger.debug("Sweep already in progress, skipping")
            return 0

        self._sweeping = True
        evicted = 0
        try:
            now = self.clock()
            for cache in self.caches:
                expired = cache.expired_entries(now)
                evicted += cache.evict_all_unchanged(expired)
        except StoreError as e:
            logger.error("Cache sweep failed: %s", e)
            self.sweep_failed.emit(str(e))
            return 0
        finally:
            self._sweeping = False

        logger.info("Expired cache entries cleaned up: %d", evicted)
        self.sweep_finished.emit(evicted)
        return evicted
