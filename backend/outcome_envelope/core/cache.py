"""Read-through cache backends.

Values are JSON-serializable and stored with a fixed TTL. ``RedisCache`` is
the production backend; ``InMemoryCache`` serves single-process dev runs and
tests. Both satisfy ``CacheBackend``.

Usage:

    cache = RedisCache.from_url(settings.REDIS_URL, ttl_seconds=60)
    cached = await cache.get(f"user:{user_id}")
    if cached is None:
        user = await repo.get(user_id)
        await cache.set(f"user:{user_id}", UserRead.model_validate(user).model_dump(mode="json"))
"""

import json
import logging
import time
from threading import Lock
from typing import Any, Protocol

import redis.asyncio as aioredis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


class CacheBackend(Protocol):
    name: str
    ttl_seconds: int

    async def get(self, key: str) -> Any | None: ...

    async def set(self, key: str, value: Any) -> None: ...

    async def delete(self, key: str) -> None: ...

    async def clear(self) -> None: ...

    async def ping(self) -> bool: ...

    async def close(self) -> None: ...


class InMemoryCache:
    """Thread-safe key/value cache with a fixed time-to-live per entry.

    Values are stored JSON-encoded so hits never share objects with callers.
    ``ttl_seconds <= 0`` disables storing.
    """

    name = "memory"

    def __init__(self, ttl_seconds: int = 60) -> None:
        self.ttl_seconds = ttl_seconds
        self._entries: dict[str, tuple[float, str]] = {}
        self._lock = Lock()

    async def get(self, key: str) -> Any | None:
        now = time.monotonic()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, raw = entry
            if expires_at <= now:
                del self._entries[key]
                return None
        return json.loads(raw)

    async def set(self, key: str, value: Any) -> None:
        if self.ttl_seconds <= 0:
            return
        raw = json.dumps(value)
        with self._lock:
            self._entries[key] = (time.monotonic() + self.ttl_seconds, raw)

    async def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    async def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        await self.clear()

    def purge_expired(self) -> int:
        """Drop expired entries. Returns how many were removed."""
        now = time.monotonic()
        with self._lock:
            expired = [k for k, (exp, _) in self._entries.items() if exp <= now]
            for key in expired:
                del self._entries[key]
            return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class RedisCache:
    """Redis-backed cache. Keys are namespaced with ``prefix``.

    Redis failures are logged and treated as cache misses; the service keeps
    answering from the repository.
    """

    name = "redis"

    def __init__(
        self,
        client: aioredis.Redis,
        ttl_seconds: int = 60,
        prefix: str = "outcome_envelope:",
    ) -> None:
        self.client = client
        self.ttl_seconds = ttl_seconds
        self.prefix = prefix

    @classmethod
    def from_url(cls, url: str, ttl_seconds: int = 60, prefix: str = "outcome_envelope:") -> "RedisCache":
        client = aioredis.from_url(url, decode_responses=True, socket_connect_timeout=3)
        return cls(client, ttl_seconds=ttl_seconds, prefix=prefix)

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    async def get(self, key: str) -> Any | None:
        try:
            raw = await self.client.get(self._key(key))
        except RedisError as exc:
            logger.warning("Cache read failed for %s: %s", key, exc)
            return None
        return json.loads(raw) if raw is not None else None

    async def set(self, key: str, value: Any) -> None:
        if self.ttl_seconds <= 0:
            return
        try:
            await self.client.setex(self._key(key), self.ttl_seconds, json.dumps(value))
        except RedisError as exc:
            logger.warning("Cache write failed for %s: %s", key, exc)

    async def delete(self, key: str) -> None:
        try:
            await self.client.delete(self._key(key))
        except RedisError as exc:
            logger.warning("Cache invalidation failed for %s: %s", key, exc)

    async def clear(self) -> None:
        """Remove every key under this cache's prefix (not the whole DB)."""
        keys = [k async for k in self.client.scan_iter(match=f"{self.prefix}*")]
        if keys:
            await self.client.delete(*keys)

    async def ping(self) -> bool:
        try:
            return bool(await self.client.ping())
        except RedisError as exc:
            logger.warning("Cache ping failed: %s", exc)
            return False

    async def close(self) -> None:
        await self.client.aclose()


def build_cache(backend: str, redis_url: str, ttl_seconds: int) -> CacheBackend:
    if backend == "redis":
        return RedisCache.from_url(redis_url, ttl_seconds=ttl_seconds)
    if backend == "memory":
        return InMemoryCache(ttl_seconds=ttl_seconds)
    raise ValueError(f"Unknown cache backend: {backend!r}")
