"""Flags cache – TTL store for resolved flag values and its key scheme."""
from mp_flags.flags.cache.keys import CacheKey
from mp_flags.flags.cache.store import CacheStats, FlagCacheStore, InMemoryFlagCache

__all__ = ["CacheKey", "CacheStats", "FlagCacheStore", "InMemoryFlagCache"]
