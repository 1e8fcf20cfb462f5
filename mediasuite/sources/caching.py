import threading
import time
from typing import Callable, Optional

from mediasuite.config import CACHE_TTL_MS
from mediasuite.core import log_step
from mediasuite.media import Source


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class CachingProxy(Source):
    """
    Source wrapper that memoizes the wrapped source's load().

    A load is a cache miss when nothing is cached yet or when the cached load
    is older than `ttl_ms`; only misses reach the wrapped source. The TTL is a
    staleness check made on each call, there is no background eviction.

    Parameters
    ----------
    source:
        The wrapped source.
    ttl_ms:
        Cache lifetime in milliseconds (defaults to config.CACHE_TTL_MS).
    clock:
        Zero-argument callable returning the current time in milliseconds.
    """

    def __init__(
        self,
        source: Source,
        ttl_ms: Optional[int] = None,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self._source = source
        self._ttl_ms = ttl_ms if ttl_ms is not None else CACHE_TTL_MS
        self._clock = clock or _monotonic_ms
        self._lock = threading.Lock()
        self._cached = False
        self._cache_timestamp: Optional[int] = None
        self.cache_key = f"cache_{id(source)}_{int(time.time() * 1000)}"

    @property
    def ttl_ms(self) -> int:
        return self._ttl_ms

    @property
    def wrapped(self) -> Source:
        return self._source

    def _is_expired(self, now: int) -> bool:
        return self._cache_timestamp is None or (now - self._cache_timestamp) > self._ttl_ms

    def load(self) -> None:
        with self._lock:
            now = self._clock()
            if not self._cached or self._is_expired(now):
                log_step(f"Cache miss - fetching from wrapped source ({self.cache_key})")
                self._source.load()
                self._cached = True
                self._cache_timestamp = now
                log_step("Content cached successfully")
            else:
                log_step(f"Cache hit - cache age: {now - self._cache_timestamp}ms")

    def play(self) -> None:
        self.load()
        self._source.play()

    def info(self) -> str:
        return f"Cached: {self._source.info()}"

    def is_ready(self) -> bool:
        return self._cached and self._source.is_ready()

    def is_cached(self) -> bool:
        return self._cached

    def cache_age_ms(self) -> Optional[int]:
        with self._lock:
            if not self._cached or self._cache_timestamp is None:
                return None
            return self._clock() - self._cache_timestamp

    def clear_cache(self) -> None:
        with self._lock:
            self._cached = False
            self._cache_timestamp = None
        log_step(f"Cache cleared for: {self.cache_key}")
