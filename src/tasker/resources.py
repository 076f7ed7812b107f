"""Process resource sampling for the menu header."""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass
from pathlib import Path

STATM_PATH = Path("/proc/self/statm")


@dataclass
class ResourceUsage:
    """Memory and CPU usage of the current process."""

    memory_mb: int
    cpu_percent: float

    def describe(self) -> str:
        return f"Memory: {self.memory_mb} MB | CPU: {self.cpu_percent:.2f}%"


def current_memory_bytes() -> int:
    """Return the resident set size of this process in bytes.

    Uses /proc when available. Elsewhere falls back to the peak RSS reported
    by getrusage, which is in kilobytes on Linux and bytes on macOS.
    """
    if STATM_PATH.exists():
        resident_pages = int(STATM_PATH.read_text().split()[1])
        return resident_pages * os.sysconf("SC_PAGE_SIZE")

    import resource

    peak = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    return peak if sys.platform == "darwin" else peak * 1024


def sample_usage(interval: float = 0.1) -> ResourceUsage:
    """Sample CPU usage over ``interval`` seconds and current memory.

    CPU percent is normalised across all CPUs, so a single busy core on a
    four-core machine reads as 25%.

    Args:
        interval: Sampling window in seconds. Must be positive.

    Returns:
        The measured usage.
    """
    if interval <= 0:
        raise ValueError(f"Sampling interval must be positive, got {interval}")

    cpus = os.cpu_count() or 1
    start = time.process_time()
    time.sleep(interval)
    elapsed_cpu = time.process_time() - start

    return ResourceUsage(
        memory_mb=current_memory_bytes() // (1024 * 1024),
        cpu_percent=elapsed_cpu / (interval * cpus) * 100,
    )
