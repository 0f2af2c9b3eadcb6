"""Search service configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class Goroutines:
    """Bounds for the number of parallel workers used per search."""

    default: int = 0
    min: int = 0
    max: int = 0


@dataclass
class SearchConfig:
    """Configuration of the search service."""

    goroutines: Goroutines = field(default_factory=Goroutines)


def _env_cpus() -> int:
    raw = os.environ.get("GOMAXPROCS", "")
    if not raw:
        return 0
    try:
        n = int(raw, 10)
    except ValueError:
        return 0
    return n if -128 <= n <= 127 else 0


def default_config() -> SearchConfig:
    """Worker bounds derived from the CPU count: min = cpus, default = 2x, max = 4x."""
    cpus = os.cpu_count() or 0
    cpus = cpus or _env_cpus()
    return SearchConfig(goroutines=Goroutines(default=cpus * 2, min=cpus, max=cpus * 4))