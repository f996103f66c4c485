"""
Data Service Proxy
==================

Core Design: Stand-in for a slow data service that adds time-bounded caching and
a sliding-window request limit in front of the real fetch.

Design Patterns & Strategies Used:
1. Proxy Pattern - Same interface as the real service, controls access to it
2. Cache-Aside - Results cached per id, expired lazily at read time
3. Sliding Window - Recent requests counted over a trailing time window

Features:
- 5 second cache per request id
- At most 10 recent requests in a trailing 10 second window
- Access log with cache-hit flag
- Cache inspection and clearing

Notes:
- Overlapping fetches for the same stale id each hit the real service;
  there is no single-flight collapsing of in-flight requests.
- Cache and log are owned by one proxy on one event loop and are not
  guarded for use from multiple threads.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional
import asyncio
import logging
import random
import string


DEFAULT_FETCH_DELAY = 1.0  # seconds
CACHE_DURATION_MS = 5000
RATE_WINDOW_MS = 10000
MAX_RECENT_REQUESTS = 10


class RateLimitExceededError(Exception):
    """Too many requests in the trailing window, caller should retry later"""

    def __init__(self, recent_requests: int, window_seconds: float):
        self.recent_requests = recent_requests
        self.window_seconds = window_seconds
        super().__init__(
            f"Too many requests ({recent_requests} in the last {window_seconds:g}s). "
            f"Please try again later."
        )


@dataclass
class CacheEntry:
    """Cached result of a real fetch"""
    data: str
    timestamp: datetime


@dataclass
class AccessLogEntry:
    """One served request"""
    id: str
    timestamp: datetime
    cached: bool = False


# ==================== SUBJECT ====================

class DataServiceInterface(ABC):
    """Common interface of the real service and its proxy"""

    @abstractmethod
    async def fetch_data(self, id: str) -> str:
        pass


class DataService(DataServiceInterface):
    """Real subject - simulates network latency before answering"""

    def __init__(self, delay: float = DEFAULT_FETCH_DELAY):
        self.delay = delay

    async def fetch_data(self, id: str) -> str:
        await asyncio.sleep(self.delay)
        token = "".join(random.choices(string.ascii_lowercase + string.digits, k=6))
        return f"Data {id}: {token}"


# ==================== PROXY PATTERN ====================

class DataServiceProxy(DataServiceInterface):
    """Caching, rate-limiting proxy around a DataService"""

    def __init__(self, real_service: DataServiceInterface,
                 cache_duration_ms: int = CACHE_DURATION_MS,
                 rate_window_ms: int = RATE_WINDOW_MS,
                 max_requests: int = MAX_RECENT_REQUESTS,
                 clock: Callable[[], datetime] = datetime.now,
                 logger: Optional[logging.Logger] = None):
        self.real_service = real_service
        self.cache_duration = timedelta(milliseconds=cache_duration_ms)
        self.rate_window = timedelta(milliseconds=rate_window_ms)
        self.max_requests = max_requests
        self.clock = clock
        self.logger = logger or logging.getLogger(__name__)
        self.cache: Dict[str, CacheEntry] = {}
        self.access_log: List[AccessLogEntry] = []

    async def fetch_data(self, id: str) -> str:
        request_time = self.clock()

        entry = self.cache.get(id)
        if entry is not None and request_time - entry.timestamp < self.cache_duration:
            self.access_log.append(AccessLogEntry(id=id, timestamp=request_time, cached=True))
            self.logger.info("Cache hit for %s", id)
            return f"[cached] {entry.data}"

        recent = self._count_recent_requests(request_time)
        if recent > self.max_requests:
            self.logger.warning("Rejecting %s: %d requests in window", id, recent)
            raise RateLimitExceededError(recent, self.rate_window.total_seconds())

        self.logger.info("Cache miss for %s, calling real service", id)
        data = await self.real_service.fetch_data(id)

        # log entry keeps the request time, cache entry the arrival time
        self.cache[id] = CacheEntry(data=data, timestamp=self.clock())
        self.access_log.append(AccessLogEntry(id=id, timestamp=request_time, cached=False))
        return data

    def _count_recent_requests(self, now: datetime) -> int:
        return sum(1 for log in self.access_log if now - log.timestamp < self.rate_window)

    def get_access_log(self) -> List[AccessLogEntry]:
        """Snapshot copy of the access log"""
        return list(self.access_log)

    def get_cache_info(self) -> Dict:
        """Entry count and per-entry age in whole seconds"""
        now = self.clock()
        return {
            "size": len(self.cache),
            "entries": [
                {"id": id, "age_seconds": int((now - entry.timestamp).total_seconds())}
                for id, entry in self.cache.items()
            ],
        }

    def clear_cache(self):
        """Empty the cache, the access log is kept"""
        self.cache.clear()
        self.logger.info("Cache cleared")


# ==================== DEMONSTRATION ====================

async def _demo():
    proxy = DataServiceProxy(DataService(delay=0.2))

    print("1. First fetch (real service):")
    print(await proxy.fetch_data("user-1"))
    print()

    print("2. Second fetch (cache):")
    print(await proxy.fetch_data("user-1"))
    print()

    print("3. Burst of distinct ids until rate limited:")
    for i in range(2, 14):
        try:
            result = await proxy.fetch_data(f"user-{i}")
            print(f"Request user-{i}: {result}")
        except RateLimitExceededError as e:
            print(f"Request user-{i}: {e}")
    print()

    print("4. Cache info:")
    info = proxy.get_cache_info()
    print(f"Entries cached: {info['size']}")
    for item in info["entries"][:3]:
        print(f"  {item['id']}: {item['age_seconds']}s ago")
    print(f"Access log length: {len(proxy.get_access_log())}")
    proxy.clear_cache()
    print(f"After clear: {proxy.get_cache_info()['size']} entries")
    print()


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("DATA SERVICE PROXY DEMONSTRATION")
    print("=" * 60)
    print()

    asyncio.run(_demo())

    print("=" * 60)
    print("DESIGN PATTERNS & STRATEGIES:")
    print("=" * 60)
    print("1. Proxy Pattern - Access control in front of the real service")
    print("2. Cache-Aside - Lazy expiry checked on read")
    print("3. Sliding Window - Trailing request count")
    print("=" * 60)


if __name__ == "__main__":
    main()
