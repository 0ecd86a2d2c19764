"""Resilience – cache-aside loading with optional per-key coalescing."""
from mp_flags.resilience.cache.aside import CacheAsidePolicy, SyncCache

__all__ = ["CacheAsidePolicy", "SyncCache"]
