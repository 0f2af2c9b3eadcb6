import threading

import pytest

from watchman.minmaxmed import Observor


class RecordingSpan:
    def __init__(self):
        self.events = []

    def add_event(self, name, attributes=None):
        self.events.append((name, dict(attributes or {})))


def test_scores_event():
    span = RecordingSpan()
    m = Observor(5)
    for n in (5, 4, 2, 1, 3):
        m.add(n)
    m.add_event(span)

    assert len(span.events) == 1
    name, attrs = span.events[0]
    assert name == "stats"
    assert set(attrs) == {"min_ms", "max_ms", "median_ms", "average_ms", "observations"}
    assert attrs["min_ms"] == 1
    assert attrs["max_ms"] == 5
    assert attrs["median_ms"] == pytest.approx(3.0)
    assert attrs["average_ms"] == pytest.approx(3.0)
    assert attrs["observations"] == 5
    assert isinstance(attrs["min_ms"], int)
    assert isinstance(attrs["median_ms"], float)


def test_durations():
    m = Observor(5)
    m.add_duration(0.010)
    m.add_duration(0.030)
    m.add_duration(0.060)
    summary = m.summary()
    assert summary["min_ms"] == 10
    assert summary["max_ms"] == 60
    assert summary["median_ms"] == pytest.approx(30.0)
    assert summary["average_ms"] == pytest.approx(100.0 / 3)
    assert summary["observations"] == 3


def test_duration_truncates_to_milliseconds():
    m = Observor(3)
    m.add_duration(0.0299)
    assert m.summary()["max_ms"] == 29


def test_no_event_without_observations():
    span = RecordingSpan()
    m = Observor(3)
    m.add_event(span)
    assert span.events == []
    assert m.summary() is None
    assert m.median() == 0.0


def test_median_window_wraps():
    m = Observor(3)
    for n in (1, 2, 3, 4, 5):
        m.add(n)
    assert m.median() == pytest.approx(4.0)
    summary = m.summary()
    assert summary["min_ms"] == 1
    assert summary["max_ms"] == 5
    assert summary["observations"] == 5


def test_median_even_window():
    m = Observor(4)
    for n in (4, 1, 3, 2):
        m.add(n)
    assert m.median() == pytest.approx(2.5)


def test_invalid_window():
    with pytest.raises(ValueError):
        Observor(0)


def test_concurrent_adds():
    m = Observor(100)

    def work(offset):
        for i in range(500):
            m.add((offset + i) % 273)

    threads = [threading.Thread(target=work, args=(k,)) for k in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    summary = m.summary()
    assert summary["observations"] == 4000
    assert summary["min_ms"] == 0
    assert summary["max_ms"] <= 272
    assert 0.0 <= summary["median_ms"] <= 272.0