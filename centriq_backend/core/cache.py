"""
In-memory response cache keyed by request parameters.

One instance lives for the whole process (created in the app lifespan)
and is handed to every repository. Keys are tuples whose first element
names the resource, which is what prefix invalidation matches on.
"""
import logging
import time
from typing import Any, Awaitable, Callable, Dict, Hashable, Optional, Tuple

logger = logging.getLogger(__name__)

CacheKey = Tuple[Hashable, ...]


def make_key(resource: str, params: Optional[dict] = None) -> CacheKey:
    """Stable key for a resource and its query parameters. None values are dropped."""
    if not params:
        return (resource,)
    items = tuple(sorted((k, _freeze(v)) for k, v in params.items() if v is not None))
    return (resource, items)


def _freeze(value: Any) -> Hashable:
    if isinstance(value, dict):
        return tuple(sorted((k, _freeze(v)) for k, v in value.items()))
    if isinstance(value, (list, tuple, set)):
        return tuple(_freeze(v) for v in value)
    return value


class ResponseCache:
    """Freshness-window cache with prefix eviction."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: Dict[CacheKey, Tuple[float, Any]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: CacheKey) -> Optional[Any]:
        """Fresh value for key, or None. Stale entries are dropped on read."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def set(self, key: CacheKey, value: Any, ttl: float) -> None:
        if ttl <= 0:
            return
        self._entries[key] = (self._clock() + ttl, value)

    async def get_or_fetch(
        self,
        key: CacheKey,
        fetch: Callable[[], Awaitable[Any]],
        ttl: float
    ) -> Any:
        """
        Reuse a fresh value or call fetch() and remember its result.
        Exceptions from fetch propagate and nothing is stored.
        """
        cached = self.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for {key[0]}")
            return cached
        value = await fetch()
        self.set(key, value, ttl)
        return value

    def invalidate(self, *prefix: Hashable) -> int:
        """Evict every key starting with prefix. Returns the number evicted."""
        if not prefix:
            return self.clear()
        size = len(prefix)
        doomed = [key for key in self._entries if key[:size] == prefix]
        for key in doomed:
            del self._entries[key]
        if doomed:
            logger.info(f"Evicted {len(doomed)} cached response(s) for {prefix[0]}")
        return len(doomed)

    def clear(self) -> int:
        count = len(self._entries)
        self._entries.clear()
        return count
