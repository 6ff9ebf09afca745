"""Settings Manager - Handles store location and runtime configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from audread.services.caching import DEFAULT_SWEEP_INTERVAL_SECONDS

DEFAULT_DB_PATH = Path.home() / ".audread" / "audread.db"


class SettingsManager:
    """
    Manages process configuration.

    Reads values from a .env file in the project root, falling back to the
    process environment and then to defaults.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, the current working directory is used.
        """
        if project_root is None:
            project_root = Path.cwd()

        self._project_root = Path(project_root)
        load_dotenv(dotenv_path=self._project_root / ".env")

    def get_db_path(self) -> Path:
        """Database file location (``AUDREAD_DB_PATH``)."""
        value = self._get("AUDREAD_DB_PATH")
        return Path(value).expanduser() if value else DEFAULT_DB_PATH

    def get_sweep_interval_seconds(self) -> int:
        """Cache sweep interval in seconds (``AUDREAD_SWEEP_INTERVAL_SECONDS``)."""
        value = self._get("AUDREAD_SWEEP_INTERVAL_SECONDS")
        if value is None:
            return DEFAULT_SWEEP_INTERVAL_SECONDS
        try:
            interval = int(value)
        except ValueError as e:
            raise ValueError(f"AUDREAD_SWEEP_INTERVAL_SECONDS must be an integer, got {value!r}") from e
        if interval <= 0:
            raise ValueError(f"AUDREAD_SWEEP_INTERVAL_SECONDS must be positive, got {interval}")
        return interval

    def get_log_level(self) -> str:
        return (self._get("AUDREAD_LOG_LEVEL") or "INFO").upper()

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        load_dotenv(dotenv_path=self._project_root / ".env", override=True)

    @staticmethod
    def _get(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
