"""Kernel time – clocks for TTL arithmetic."""
from mp_flags.kernel.time.clock import Clock, FrozenClock, SystemClock, utc_now

__all__ = ["Clock", "FrozenClock", "SystemClock", "utc_now"]
