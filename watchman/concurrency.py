"""Adaptive selection of a concurrency level by champion/challenger testing.

A champion concurrency receives most of the traffic while nearby challengers
receive the rest. Recorded durations feed rolling statistics, and a challenger
that is significantly faster takes over as champion.
"""

from __future__ import annotations

import math
import random
import threading
import time
from dataclasses import dataclass
from typing import NamedTuple, Optional

DEFAULT_WINDOW = 100


def _to_micros(seconds: float) -> int:
    """Convert seconds to whole microseconds, truncating toward zero."""
    nanos = round(seconds * 1_000_000_000)
    micros = abs(nanos) // 1_000
    return micros if nanos >= 0 else -micros


class RollingStats:
    """A fixed-size ring of durations with incremental mean and variance."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            capacity = DEFAULT_WINDOW
        self.capacity = capacity
        self._buffer: list[int] = [0] * capacity
        self._index = 0
        self._count = 0
        self._mean = 0.0
        self._m2 = 0.0
        self._lock = threading.Lock()

    def add(self, seconds: float) -> None:
        """Insert a duration given in seconds, replacing the oldest when full."""
        micros = _to_micros(seconds)
        new_val = float(micros)
        if math.isnan(new_val) or math.isinf(new_val):
            return

        with self._lock:
            if self._count >= self.capacity:
                old_val = float(self._buffer[self._index])
                n = float(self._count)
                delta = old_val - self._mean
                self._mean -= delta / n
                self._m2 -= delta * (old_val - self._mean)
            else:
                self._count += 1

            self._buffer[self._index] = micros
            self._index = (self._index + 1) % self.capacity

            n = float(self._count)
            delta = new_val - self._mean
            self._mean += delta / n
            self._m2 += delta * (new_val - self._mean)

    def get_stats(self) -> tuple[float, float, int]:
        """Return ``(mean, stddev, count)`` with mean and stddev in microseconds."""
        with self._lock:
            if self._count < 2:
                return self._mean, 0.0, self._count
            variance = self._m2 / (self._count - 1)
            return self._mean, math.sqrt(max(variance, 0.0)), self._count


class Interval(NamedTuple):
    """A confidence interval around a mean."""

    low: float
    high: float


@dataclass(frozen=True)
class _Evaluation:
    concurrency: int
    mean: float
    ci: Interval


def confidence_interval(mean: float, std: float, count: int, z: float) -> Interval:
    """Return the interval ``mean ± z * std / sqrt(count)``; degenerate when undefined."""
    if count < 2 or std == 0:
        return Interval(mean, mean)
    delta = z * (std / math.sqrt(count))
    return Interval(mean - delta, mean + delta)


class ConcurrencyManager:
    """Picks concurrency levels and promotes faster challengers to champion."""

    def __init__(self, initial_champion: int, min_c: int, max_c: int) -> None:
        if initial_champion < min_c or initial_champion > max_c:
            raise ValueError(
                f"initial champion {initial_champion} must be between min {min_c} and max {max_c}"
            )
        if min_c <= 0:
            raise ValueError(f"minimum concurrency must be positive, got {min_c}")
        if max_c <= min_c:
            raise ValueError(f"maximum concurrency {max_c} must be greater than minimum {min_c}")

        self.min_c = min_c
        self.max_c = max_c
        self.confidence_level = 1.645  # z-score for roughly 90%
        self.min_samples = 10
        self.min_improvement = 0.02
        self.window_size = DEFAULT_WINDOW
        self.switch_cooldown = 1.0
        self.cleanup_interval = 600.0

        self._lock = threading.Lock()
        self._champion = initial_champion
        self._stats: dict[int, RollingStats] = {}
        self._weights: dict[int, float] = {}
        self._last_switch: Optional[float] = None
        self._last_cleanup = time.time()
        self._total_samples = 0

        self._evaluate_signal = threading.Event()
        self._stopped = threading.Event()

        self._set_champion(initial_champion)

        self._evaluator = threading.Thread(target=self._evaluation_loop, daemon=True)
        self._cleaner = threading.Thread(target=self._cleanup_loop, daemon=True)
        self._evaluator.start()
        self._cleaner.start()

    def __enter__(self) -> "ConcurrencyManager":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    @property
    def champion(self) -> int:
        """The current best concurrency."""
        with self._lock:
            return self._champion

    @property
    def traffic_weights(self) -> dict[int, float]:
        """A copy of the traffic share given to each concurrency under test."""
        with self._lock:
            return dict(self._weights)

    @property
    def stats(self) -> dict[int, RollingStats]:
        """A copy of the mapping from concurrency to its rolling statistics."""
        with self._lock:
            return dict(self._stats)

    def _set_champion(self, c: int) -> None:
        with self._lock:
            self._champion = c
            self._weights = {c: 0.7}
            self._ensure_stats(c)

            challengers = []
            for step in (1, 5):
                if c + step <= self.max_c:
                    challengers.append(c + step)
                if c - step >= self.min_c:
                    challengers.append(c - step)

            if challengers:
                weight = 0.3 / len(challengers)
                for challenger in challengers:
                    self._weights[challenger] = weight
                    self._ensure_stats(challenger)

    def _ensure_stats(self, c: int) -> None:
        if c not in self._stats:
            self._stats[c] = RollingStats(self.window_size)

    def pick_concurrency(self) -> int:
        """Choose a concurrency at random according to the traffic weights."""
        with self._lock:
            total = sum(self._weights.values())
            if total == 0:
                return self._champion
            r = random.random() * total
            for c, w in self._weights.items():
                r -= w
                if r <= 0:
                    return c
            return self._champion

    def record_duration(self, concurrency: int, seconds: float) -> None:
        """Record how long a run at ``concurrency`` took, in seconds."""
        with self._lock:
            stats = self._stats.get(concurrency)
            if stats is None:
                stats = RollingStats(self.window_size)
                self._stats[concurrency] = stats
            self._total_samples += 1
            due = self._total_samples >= self.min_samples

        stats.add(seconds)
        if due:
            self._evaluate_signal.set()

    def _evaluation_loop(self) -> None:
        while not self._stopped.is_set():
            self._evaluate_signal.wait()
            self._evaluate_signal.clear()
            if self._stopped.is_set():
                return
            if self._all_have_min_samples():
                self.evaluate()

    def _all_have_min_samples(self) -> bool:
        with self._lock:
            for c in self._weights:
                stats = self._stats.get(c)
                if stats is None or stats.get_stats()[2] < self.min_samples:
                    return False
            return True

    def evaluate(self) -> None:
        """Promote the best significantly faster challenger, outside the cooldown."""
        now = time.monotonic()
        with self._lock:
            if self._last_switch is not None and now - self._last_switch < self.switch_cooldown:
                return
            candidates = [(c, self._stats.get(c)) for c in self._weights]
            champion = self._champion

        results: list[_Evaluation] = []
        for c, stats in candidates:
            if stats is None:
                continue
            mean, std, count = stats.get_stats()
            if count < self.min_samples:
                continue
            results.append(
                _Evaluation(c, mean, confidence_interval(mean, std, count, self.confidence_level))
            )

        if len(results) < 2:
            return

        champ = next((r for r in results if r.concurrency == champion), None)
        if champ is None or champ.mean == 0:
            return

        best: Optional[_Evaluation] = None
        best_improvement = 0.0
        for r in results:
            if r.concurrency == champion:
                continue
            improvement = (champ.mean - r.mean) / champ.mean
            if r.ci.high < champ.ci.low and improvement >= self.min_improvement:
                if improvement > best_improvement:
                    best = r
                    best_improvement = improvement

        if best is not None and best_improvement > 0:
            self._set_champion(best.concurrency)
            with self._lock:
                self._last_switch = now

    def _cleanup_loop(self) -> None:
        while not self._stopped.wait(timeout=max(self.cleanup_interval, 0.01)):
            self.cleanup_old_stats()

    def cleanup_old_stats(self) -> None:
        """Drop statistics for concurrencies no longer under test, once per interval."""
        with self._lock:
            if not self._last_cleanup + self.cleanup_interval < time.time():
                return
            for c in [c for c in self._stats if c not in self._weights]:
                del self._stats[c]
            self._last_cleanup = time.time()

    def close(self) -> None:
        """Stop the background evaluation and cleanup threads."""
        self._stopped.set()
        self._evaluate_signal.set()
        for thread in (self._evaluator, self._cleaner):
            if thread.is_alive() and thread is not threading.current_thread():
                thread.join(timeout=5)