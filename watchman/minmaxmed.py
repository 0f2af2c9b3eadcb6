"""Streaming minimum, maximum, average and windowed median of observations."""

from __future__ import annotations

import statistics
import threading
from collections import deque
from typing import Any, Optional


class Observor:
    """Records min/max/sum/count of all observations and a median over a recent window."""

    def __init__(self, median_window_size: int) -> None:
        if median_window_size <= 0:
            raise ValueError(f"median window size must be positive, got {median_window_size}")
        self._lock = threading.Lock()
        self._min: Optional[int] = None
        self._max: Optional[int] = None
        self._sum = 0
        self._count = 0
        self._window: deque[float] = deque(maxlen=median_window_size)

    def add_duration(self, seconds: float) -> None:
        """Record a duration given in seconds, as whole milliseconds (truncated)."""
        nanos = round(seconds * 1_000_000_000)
        millis = abs(nanos) // 1_000_000
        self.add(millis if nanos >= 0 else -millis)

    def add(self, n: int) -> None:
        """Record one observation."""
        with self._lock:
            if self._min is None or n < self._min:
                self._min = n
            if self._max is None or n > self._max:
                self._max = n
            self._sum += n
            self._count += 1
            self._window.append(float(n))

    def median(self) -> float:
        """Median of the observations in the current window, or 0.0 when empty."""
        with self._lock:
            return self._median()

    def _median(self) -> float:
        if not self._window:
            return 0.0
        return float(statistics.median(self._window))

    def summary(self) -> Optional[dict[str, Any]]:
        """Return the current statistics, or None before any observation."""
        with self._lock:
            return self._summary()

    def _summary(self) -> Optional[dict[str, Any]]:
        if self._count == 0:
            return None
        return {
            "min_ms": self._min,
            "max_ms": self._max,
            "median_ms": self._median(),
            "average_ms": self._sum / self._count,
            "observations": self._count,
        }

    def add_event(self, span: Any) -> None:
        """Attach a "stats" event to ``span`` (anything with ``add_event(name, attributes=...)``)."""
        with self._lock:
            attributes = self._summary()
            if attributes is None:
                return
            span.add_event("stats", attributes=attributes)