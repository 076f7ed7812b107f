"""Tests for tasker.config module."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tasker.config import (
    CONFIG_FILE,
    TASKER_DIR,
    DisplayConfig,
    LoggingConfig,
    TaskerConfig,
)


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = LoggingConfig()
        assert config.level == "DEBUG"
        assert config.console is True
        assert config.console_level == "INFO"
        assert config.format == "text"
        assert config.backup_count == 7

    def test_file_path(self) -> None:
        """Test file path joins directory and file name."""
        config = LoggingConfig(directory="logs", file_name="app.log")
        assert config.file_path == Path("logs") / "app.log"

    def test_invalid_format(self) -> None:
        """Test that unknown formats are rejected."""
        with pytest.raises(Exception):
            LoggingConfig(format="xml")  # type: ignore[arg-type]

    def test_invalid_level(self) -> None:
        """Test that unknown levels are rejected."""
        with pytest.raises(Exception):
            LoggingConfig(level="TRACE")  # type: ignore[arg-type]

    def test_negative_backup_count(self) -> None:
        """Test backup count cannot be negative."""
        with pytest.raises(Exception):
            LoggingConfig(backup_count=-1)


class TestDisplayConfig:
    """Tests for DisplayConfig model."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = DisplayConfig()
        assert config.show_resources is True
        assert config.cpu_sample_seconds == 0.1
        assert config.clear_screen is True
        assert config.pause_after_action is True

    def test_sample_interval_must_be_positive(self) -> None:
        """Test a zero sampling window is rejected."""
        with pytest.raises(Exception):
            DisplayConfig(cpu_sample_seconds=0)


class TestTaskerConfig:
    """Tests for TaskerConfig model."""

    def test_defaults(self) -> None:
        """Test default nested configs."""
        config = TaskerConfig()
        assert config.logging == LoggingConfig()
        assert config.display == DisplayConfig()

    def test_load_missing_file(self, temp_project: Path) -> None:
        """Test loading returns defaults when file doesn't exist."""
        config = TaskerConfig.load(temp_project / "missing.json")
        assert config == TaskerConfig()

    def test_load_default_path(self, temp_tasker_dir: Path) -> None:
        """Test loading from .tasker/config.json by default."""
        (temp_tasker_dir / "config.json").write_text(
            json.dumps({"logging": {"format": "json"}, "display": {"show_resources": False}})
        )

        config = TaskerConfig.load()

        assert config.logging.format == "json"
        assert config.logging.level == "DEBUG"
        assert config.display.show_resources is False

    def test_load_invalid_values(self, temp_tasker_dir: Path) -> None:
        """Test invalid settings raise on load."""
        path = temp_tasker_dir / "config.json"
        path.write_text(json.dumps({"display": {"cpu_sample_seconds": -1}}))

        with pytest.raises(Exception):
            TaskerConfig.load(path)

    def test_save_and_load(self, temp_project: Path) -> None:
        """Test config survives a save/load cycle."""
        config = TaskerConfig(
            logging=LoggingConfig(level="INFO", format="json"),
            display=DisplayConfig(clear_screen=False),
        )
        path = temp_project / "nested" / "config.json"

        config.save(path)

        assert path.exists()
        assert TaskerConfig.load(path) == config

    def test_save_default_path(self, temp_project: Path) -> None:
        """Test save writes to .tasker/config.json by default."""
        TaskerConfig().save()

        data = json.loads((temp_project / ".tasker" / "config.json").read_text())
        assert data["logging"]["file_name"] == "task-manager.log"
        assert data["display"]["pause_after_action"] is True


class TestConstants:
    """Tests for module-level paths."""

    def test_paths(self) -> None:
        """Test default paths."""
        assert TASKER_DIR == Path(".tasker")
        assert CONFIG_FILE == Path(".tasker/config.json")
