import threading
import time
from typing import List

import pytest

from mediasuite.core import SourceError
from mediasuite.media import Source
from mediasuite.sources import CachingProxy


class _SlowSource(Source):
    """Source whose load takes long enough for concurrent callers to overlap."""

    def __init__(self, log: List[str]) -> None:
        self.log = log

    def load(self) -> None:
        time.sleep(0.05)
        self.log.append("A.load")

    def play(self) -> None:
        self.log.append("A.play")

    def info(self) -> str:
        return "Slow source"

    def is_ready(self) -> bool:
        return bool(self.log)


def test_second_load_within_ttl_is_a_cache_hit(make_source, event_log, clock) -> None:
    proxy = CachingProxy(make_source("A"), ttl_ms=5000, clock=clock)

    proxy.load()
    clock.now = 3000
    proxy.load()

    assert event_log == ["A.load"]


def test_load_after_ttl_goes_to_wrapped_source(make_source, event_log, clock) -> None:
    proxy = CachingProxy(make_source("A"), ttl_ms=5000, clock=clock)

    proxy.load()
    clock.now = 6000
    proxy.load()

    assert event_log == ["A.load", "A.load"]


def test_load_exactly_at_ttl_is_still_fresh(make_source, event_log, clock) -> None:
    proxy = CachingProxy(make_source("A"), ttl_ms=5000, clock=clock)

    proxy.load()
    clock.now = 5000
    proxy.load()

    assert event_log == ["A.load"]


def test_clear_cache_forces_next_load(make_source, event_log, clock) -> None:
    proxy = CachingProxy(make_source("A"), ttl_ms=5000, clock=clock)

    proxy.load()
    proxy.clear_cache()

    assert proxy.is_cached() is False
    assert proxy.cache_age_ms() is None

    proxy.load()

    assert event_log == ["A.load", "A.load"]


def test_play_loads_through_cache_then_plays(make_source, event_log, clock) -> None:
    proxy = CachingProxy(make_source("A"), ttl_ms=5000, clock=clock)

    proxy.play()
    clock.now = 1000
    proxy.play()

    assert event_log == ["A.load", "A.play", "A.play"]


def test_is_ready_requires_cache_and_wrapped_source(make_source, clock) -> None:
    source = make_source("A")
    proxy = CachingProxy(source, ttl_ms=5000, clock=clock)

    assert proxy.is_ready() is False

    proxy.load()
    assert proxy.is_ready() is True

    source.loaded = False
    assert proxy.is_ready() is False


def test_info_marks_source_as_cached(make_source) -> None:
    proxy = CachingProxy(make_source("A"))

    assert proxy.info() == "Cached: Recording source A"


def test_cache_age_and_key(make_source, clock) -> None:
    source = make_source("A")
    proxy = CachingProxy(source, ttl_ms=5000, clock=clock)
    clock.now = 100
    proxy.load()
    clock.now = 350

    assert proxy.cache_age_ms() == 250
    assert proxy.cache_key.startswith(f"cache_{id(source)}_")


def test_default_ttl_comes_from_config(make_source, monkeypatch) -> None:
    monkeypatch.setattr("mediasuite.sources.caching.CACHE_TTL_MS", 1234, raising=True)

    proxy = CachingProxy(make_source("A"))

    assert proxy.ttl_ms == 1234


def test_failed_load_is_not_cached(make_source, clock) -> None:
    proxy = CachingProxy(make_source("A", fail_on="load"), ttl_ms=5000, clock=clock)

    with pytest.raises(SourceError):
        proxy.load()

    assert proxy.is_cached() is False


def test_concurrent_first_loads_hit_wrapped_source_once(event_log, clock) -> None:
    proxy = CachingProxy(_SlowSource(event_log), ttl_ms=5000, clock=clock)
    barrier = threading.Barrier(8)
    errors: List[Exception] = []

    def worker() -> None:
        barrier.wait()
        try:
            proxy.load()
        except Exception as exc:
            errors.append(exc)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert event_log == ["A.load"]
    assert proxy.is_ready()
