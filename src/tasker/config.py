"""Configuration models for tasker."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class LoggingConfig(BaseModel):
    """Configuration for log sinks."""

    level: LogLevel = "DEBUG"
    console: bool = True
    console_level: LogLevel = "INFO"
    directory: str = ".tasker/logs"
    file_name: str = "task-manager.log"
    format: Literal["text", "json"] = "text"
    backup_count: int = Field(default=7, ge=0)

    @property
    def file_path(self) -> Path:
        """Full path of the active log file."""
        return Path(self.directory) / self.file_name


class DisplayConfig(BaseModel):
    """Configuration for the console menu."""

    show_resources: bool = True
    cpu_sample_seconds: float = Field(default=0.1, gt=0)
    clear_screen: bool = True
    pause_after_action: bool = True


class TaskerConfig(BaseModel):
    """Main configuration for tasker."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> TaskerConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = CONFIG_FILE

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)


# Default config directory
TASKER_DIR = Path(".tasker")
CONFIG_FILE = TASKER_DIR / "config.json"
