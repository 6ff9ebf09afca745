"""Main entry point for the AudRead store process."""

import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from PySide6.QtCore import QCoreApplication

from audread.core import StoreUnavailable
from audread.io import DataStore, SettingsRepository, StoreHandle
from audread.logging_setup import configure_logging
from audread.services import AudioCache, CacheSweeper, DictionaryCache, SettingsManager

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Everything built by the composition root, passed to consumers."""

    handle: StoreHandle
    data_store: DataStore
    settings: SettingsRepository
    audio_cache: AudioCache
    dictionary_cache: DictionaryCache
    sweeper: CacheSweeper

    def shutdown(self) -> None:
        self.sweeper.stop()
        self.handle.close()


def build_context(config: SettingsManager) -> AppContext:
    """
    Open the store once and wire every accessor to the same handle.

    Raises:
        StoreUnavailable: If the database cannot be opened.
    """
    handle = StoreHandle(config.get_db_path())
    handle.open()

    audio_cache = AudioCache(handle)
    dictionary_cache = DictionaryCache(handle)
    sweeper = CacheSweeper(
        [audio_cache, dictionary_cache],
        interval_seconds=config.get_sweep_interval_seconds(),
    )
    return AppContext(
        handle=handle,
        data_store=DataStore(handle),
        settings=SettingsRepository(handle),
        audio_cache=audio_cache,
        dictionary_cache=dictionary_cache,
        sweeper=sweeper,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Bootstrap the store following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Initialize Application
    app = QCoreApplication(argv if argv is not None else sys.argv)
    app.setApplicationName("AudRead")
    app.setOrganizationName("AudRead")

    # 2. Configuration and logging
    config = SettingsManager()
    configure_logging(config.get_log_level())

    # 3. Initialize Infrastructure
    try:
        context = build_context(config)
    except StoreUnavailable as e:
        logger.error("AudRead store unavailable: %s", e)
        return 1

    # 4. Background cache expiry, then run the event loop
    context.sweeper.start()
    app.aboutToQuit.connect(context.shutdown)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
