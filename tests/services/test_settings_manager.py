"""Unit tests for SettingsManager."""

import os
import tempfile
from pathlib import Path

import pytest

from audread.services import SettingsManager
from audread.services.caching import DEFAULT_SWEEP_INTERVAL_SECONDS
from audread.services.settings_manager import DEFAULT_DB_PATH

ENV_VARS = ("AUDREAD_DB_PATH", "AUDREAD_SWEEP_INTERVAL_SECONDS", "AUDREAD_LOG_LEVEL")


@pytest.fixture
def temp_env_dir():
    """Provide a temporary directory for .env files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Clean up AUDREAD_* variables before and after test."""
    saved = {name: os.environ.pop(name, None) for name in ENV_VARS}
    yield
    for name, value in saved.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


class TestSettingsManagerDefaults:
    def test_defaults_without_env_file(self, temp_env_dir, clean_env):
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_db_path() == DEFAULT_DB_PATH
        assert settings.get_sweep_interval_seconds() == DEFAULT_SWEEP_INTERVAL_SECONDS
        assert settings.get_log_level() == "INFO"

    def test_empty_values_fall_back_to_defaults(self, temp_env_dir, clean_env):
        (temp_env_dir / ".env").write_text("AUDREAD_DB_PATH=\nAUDREAD_SWEEP_INTERVAL_SECONDS=   \n")
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_db_path() == DEFAULT_DB_PATH
        assert settings.get_sweep_interval_seconds() == DEFAULT_SWEEP_INTERVAL_SECONDS


class TestSettingsManagerEnvFile:
    def test_values_read_from_env_file(self, temp_env_dir, clean_env):
        db_file = temp_env_dir / "data" / "reader.db"
        (temp_env_dir / ".env").write_text(
            f"AUDREAD_DB_PATH={db_file}\n"
            "AUDREAD_SWEEP_INTERVAL_SECONDS=600\n"
            "AUDREAD_LOG_LEVEL=debug\n"
        )
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_db_path() == db_file
        assert settings.get_sweep_interval_seconds() == 600
        assert settings.get_log_level() == "DEBUG"

    def test_invalid_interval_raises(self, temp_env_dir, clean_env):
        os.environ["AUDREAD_SWEEP_INTERVAL_SECONDS"] = "hourly"
        settings = SettingsManager(project_root=temp_env_dir)
        with pytest.raises(ValueError, match="AUDREAD_SWEEP_INTERVAL_SECONDS"):
            settings.get_sweep_interval_seconds()

    def test_non_positive_interval_raises(self, temp_env_dir, clean_env):
        os.environ["AUDREAD_SWEEP_INTERVAL_SECONDS"] = "0"
        settings = SettingsManager(project_root=temp_env_dir)
        with pytest.raises(ValueError, match="positive"):
            settings.get_sweep_interval_seconds()

    def test_reload_env_updates_values(self, temp_env_dir, clean_env):
        """reload_env should pick up changes to .env file."""
        env_file = temp_env_dir / ".env"
        env_file.write_text("AUDREAD_SWEEP_INTERVAL_SECONDS=60\n")
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_sweep_interval_seconds() == 60

        env_file.write_text("AUDREAD_SWEEP_INTERVAL_SECONDS=120\n")
        settings.reload_env()
        assert settings.get_sweep_interval_seconds() == 120
