"""Shared fixtures for tasker tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Generator
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from tasker.config import DisplayConfig
from tasker.resources import ResourceUsage
from tasker.store import TaskStore


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def temp_tasker_dir(temp_project: Path) -> Path:
    """Create a temporary .tasker directory."""
    tasker_dir = temp_project / ".tasker"
    tasker_dir.mkdir()
    return tasker_dir


@pytest.fixture
def fake_clock() -> Callable[[], datetime]:
    """Clock that advances one minute on every call."""
    current = [datetime(2025, 1, 10, 10, 0, 0)]

    def tick() -> datetime:
        value = current[0]
        current[0] = value + timedelta(minutes=1)
        return value

    return tick


@pytest.fixture
def store(fake_clock: Callable[[], datetime]) -> TaskStore:
    """Empty store with a deterministic clock."""
    return TaskStore(clock=fake_clock)


@pytest.fixture
def quiet_display() -> DisplayConfig:
    """Display settings suitable for non-interactive tests."""
    return DisplayConfig(show_resources=False, clear_screen=False, pause_after_action=False)


@pytest.fixture
def fixed_sampler() -> Callable[[float], ResourceUsage]:
    """Resource sampler returning a constant reading."""

    def sample(interval: float) -> ResourceUsage:
        return ResourceUsage(memory_mb=42, cpu_percent=1.5)

    return sample


@pytest.fixture
def session_logger() -> Generator[logging.Logger, None, None]:
    """Logger isolated from handlers, captured through caplog."""
    logger = logging.getLogger("tasker_tests.session")
    logger.setLevel(logging.DEBUG)
    yield logger
    logger.handlers.clear()
