"""Helpers for splitting work over a sequence between threads."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")


def split_indices(total: int, groups: int) -> list[int]:
    """Return boundary indices that split ``total`` items into ``groups`` chunks.

    Earlier chunks take one extra item each while a remainder is left over.
    """
    if groups <= 1 or groups >= total:
        return [0, total]

    chunk_size, remaining = divmod(total, groups)
    bounds = [0]
    pos = 0
    for _ in range(groups - 1):
        pos += chunk_size
        if remaining > 0:
            pos += 1
            remaining -= 1
        bounds.append(pos)
    bounds.append(total)
    return bounds


def _chunks(length: int, workers: int) -> list[range]:
    if workers <= 0:
        raise ValueError(f"workers must be positive, got {workers}")
    chunk_size = max(length // workers, 1)
    return [range(start, min(start + chunk_size, length)) for start in range(0, length, chunk_size)]


def process_slice(items: Sequence[T], workers: int, fn: Callable[[T], R]) -> list[R]:
    """Apply ``fn`` to every item concurrently, returning results in input order."""
    if not items:
        return []
    if len(items) < workers:
        return [fn(item) for item in items]

    chunks = _chunks(len(items), workers)
    out: list[R] = [None] * len(items)  # type: ignore[list-item]

    def run(span: range) -> None:
        for i in span:
            out[i] = fn(items[i])

    with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
        for future in [pool.submit(run, span) for span in chunks]:
            future.result()
    return out


def process_slice_fn(items: Sequence[T], workers: int, fn: Callable[[T], object]) -> None:
    """Call ``fn`` on every item concurrently, in chunks."""
    if not items:
        return
    if len(items) < workers:
        for item in items:
            fn(item)
        return

    chunks = _chunks(len(items), workers)

    def run(span: range) -> None:
        for i in span:
            fn(items[i])

    with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
        for future in [pool.submit(run, span) for span in chunks]:
            future.result()