"""Flags cache – FlagCacheStore port and the in-memory TTL implementation."""
from __future__ import annotations

import dataclasses
import threading
from collections import OrderedDict
from typing import Protocol, TypeAlias, runtime_checkable

from mp_flags.kernel.time import Clock, SystemClock

__all__ = [
    "CacheStats",
    "FlagCacheStore",
    "InMemoryFlagCache",
]

FlagValue: TypeAlias = bool | str


@dataclasses.dataclass(frozen=True)
class CacheStats:
    """Snapshot of the cache at the moment it was taken."""
    size: int
    keys: list[str]


@dataclasses.dataclass(frozen=True)
class _Entry:
    value: FlagValue
    expires_at: float


@runtime_checkable
class FlagCacheStore(Protocol):
    def get(self, key: str) -> FlagValue | None: ...
    def set(self, key: str, value: FlagValue, ttl_seconds: float) -> None: ...
    def clear(self) -> None: ...
    def keys(self) -> list[str]: ...
    def __len__(self) -> int: ...


class InMemoryFlagCache:
    """Process-local TTL cache.

    Expired entries are never returned; they are dropped when touched by
    :meth:`get` and skipped by :meth:`keys` / ``len()``. ``max_entries``
    bounds the store by evicting the oldest write first; ``None`` keeps
    it unbounded.
    """

    def __init__(self, clock: Clock | None = None, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be >= 1")
        self._clock = clock or SystemClock()
        self._max_entries = max_entries
        self._data: OrderedDict[str, _Entry] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> FlagValue | None:
        now = self._clock.timestamp()
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                return None
            if now >= entry.expires_at:
                del self._data[key]
                return None
            return entry.value

    def set(self, key: str, value: FlagValue, ttl_seconds: float) -> None:
        expires_at = self._clock.timestamp() + ttl_seconds
        with self._lock:
            self._data.pop(key, None)
            self._data[key] = _Entry(value=value, expires_at=expires_at)
            if self._max_entries is not None:
                while len(self._data) > self._max_entries:
                    self._data.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def keys(self) -> list[str]:
        now = self._clock.timestamp()
        with self._lock:
            return [k for k, e in self._data.items() if now < e.expires_at]

    def stats(self) -> CacheStats:
        live = self.keys()
        return CacheStats(size=len(live), keys=live)

    def __len__(self) -> int:
        return len(self.keys())
