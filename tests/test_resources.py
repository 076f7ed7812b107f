"""Tests for tasker.resources module."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from tasker.resources import ResourceUsage, current_memory_bytes, sample_usage


class TestResourceUsage:
    """Tests for ResourceUsage dataclass."""

    def test_describe(self) -> None:
        """Test the header line format."""
        usage = ResourceUsage(memory_mb=128, cpu_percent=3.14159)
        assert usage.describe() == "Memory: 128 MB | CPU: 3.14%"


class TestCurrentMemoryBytes:
    """Tests for current_memory_bytes."""

    def test_positive(self) -> None:
        """Test the running process reports some memory."""
        assert current_memory_bytes() > 0


class TestSampleUsage:
    """Tests for sample_usage."""

    def test_rejects_non_positive_interval(self) -> None:
        """Test a zero or negative window raises ValueError."""
        with pytest.raises(ValueError):
            sample_usage(0)
        with pytest.raises(ValueError):
            sample_usage(-1)

    def test_normalises_by_cpu_count(self) -> None:
        """Test CPU time is divided by interval and CPU count."""
        with (
            patch("tasker.resources.time.process_time", side_effect=[1.0, 1.2]),
            patch("tasker.resources.time.sleep") as mock_sleep,
            patch("tasker.resources.os.cpu_count", return_value=4),
            patch("tasker.resources.current_memory_bytes", return_value=64 * 1024 * 1024),
        ):
            usage = sample_usage(0.5)

        mock_sleep.assert_called_once_with(0.5)
        assert usage.memory_mb == 64
        assert usage.cpu_percent == pytest.approx(10.0)

    def test_real_sample(self) -> None:
        """Test a short real sample returns sane values."""
        usage = sample_usage(0.01)
        assert usage.memory_mb >= 0
        assert usage.cpu_percent >= 0
