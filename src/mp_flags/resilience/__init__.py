"""Resilience – timeouts and cache-aside loading."""
from mp_flags.resilience.cache import CacheAsidePolicy
from mp_flags.resilience.timeouts import TimeoutPolicy

__all__ = ["CacheAsidePolicy", "TimeoutPolicy"]
