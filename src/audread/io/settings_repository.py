"""Persistence of the single user settings record."""

import json
import logging
from typing import Any, Mapping

from audread.core import SETTINGS_KEY, AppSettings, merge_settings
from audread.io.store_handle import StoreHandle

logger = logging.getLogger(__name__)


class SettingsRepository:
    """Loads and merges the user settings stored under a fixed key."""

    def __init__(self, handle: StoreHandle) -> None:
        if handle is None:
            raise RuntimeError("StoreHandle required")
        self.handle = handle

    def load_settings(self) -> AppSettings:
        """Return the stored settings, or ``{}`` if none were saved yet.

        Raises:
            TransactionFailed: If the read fails; this is not treated as empty.
        """
        rows = self.handle.read(
            "load_settings",
            "SELECT value FROM settings WHERE key = ?",
            (SETTINGS_KEY,),
        )
        if not rows:
            return {}
        return json.loads(rows[0]["value"])

    def save_settings(self, partial: Mapping[str, Any]) -> AppSettings:
        """Merge ``partial`` over the stored settings and persist the result.

        The read, merge and write happen in one transaction.

        Returns:
            The settings value now stored.

        Raises:
            ValueError: If a group is not a mapping or a value is not
                JSON-serialisable (nothing is written).
        """
        with self.handle.transaction("save_settings") as cur:
            cur.execute("SELECT value FROM settings WHERE key = ?", (SETTINGS_KEY,))
            row = cur.fetchone()
            existing = json.loads(row["value"]) if row else {}
            merged = merge_settings(existing, partial)
            try:
                encoded = json.dumps(merged, ensure_ascii=False)
            except TypeError as e:
                raise ValueError(f"Settings are not JSON-serialisable: {e}") from e
            cur.execute(
                """
                INSERT INTO settings (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (SETTINGS_KEY, encoded),
            )
        logger.info("Settings saved (groups: %s)", ", ".join(sorted(merged)) or "none")
        return merged
