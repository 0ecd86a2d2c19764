from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Generic, Protocol, TypeVar

__all__ = [
    "CacheAsidePolicy",
    "SyncCache",
]

T = TypeVar("T")


class SyncCache(Protocol):
    def get(self, key: str) -> Any: ...
    def set(self, key: str, value: Any, ttl_seconds: float) -> None: ...


class CacheAsidePolicy(Generic[T]):
    """Implements the cache-aside (lazy-loading) pattern over a process-local cache.

    Without coalescing every caller that misses runs ``loader`` itself and
    writes the result back (last write wins). With ``coalesce=True`` only
    one coroutine loads per key; the others wait on the same lock and then
    read what it cached.
    """

    def __init__(self, cache: SyncCache) -> None:
        self._cache = cache
        self._locks: dict[str, asyncio.Lock] = {}
        self._waiters: dict[str, int] = {}

    async def get_or_load(
        self,
        key: str,
        loader: Callable[[], Awaitable[T]],
        ttl_seconds: float,
        *,
        coalesce: bool = False,
    ) -> T:
        cached = self._cache.get(key)
        if cached is not None:
            return cached  # type: ignore[no-any-return]

        if not coalesce:
            return await self._load(key, loader, ttl_seconds)

        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        self._waiters[key] = self._waiters.get(key, 0) + 1
        try:
            async with lock:
                # Double-check after acquiring lock
                cached = self._cache.get(key)
                if cached is not None:
                    return cached  # type: ignore[no-any-return]
                return await self._load(key, loader, ttl_seconds)
        finally:
            self._waiters[key] -= 1
            if not self._waiters[key]:
                del self._waiters[key]
                del self._locks[key]

    def in_flight(self) -> list[str]:
        """Keys that currently have a coalesced load running or queued."""
        return list(self._locks)

    async def _load(self, key: str, loader: Callable[[], Awaitable[T]], ttl_seconds: float) -> T:
        value = await loader()
        self._cache.set(key, value, ttl_seconds)
        return value
