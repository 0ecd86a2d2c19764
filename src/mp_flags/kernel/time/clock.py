"""Kernel time – Clock protocol + implementations.

Cache expiry compares epoch seconds, so ``timestamp()`` is the method
that matters; ``now()`` is there for log and report timestamps.
"""
from __future__ import annotations

import time
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: source of the current time."""

    def now(self) -> datetime: ...
    def timestamp(self) -> float: ...


class SystemClock:
    """Wall clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def timestamp(self) -> float:
        return time.time()


class FrozenClock:
    """Clock that only moves when :meth:`advance` is called.

    *start* is a timezone-aware datetime or an epoch timestamp.
    """

    def __init__(self, start: datetime | float = 0.0) -> None:
        self._ts = start.timestamp() if isinstance(start, datetime) else float(start)

    def now(self) -> datetime:
        return datetime.fromtimestamp(self._ts, UTC)

    def timestamp(self) -> float:
        return self._ts

    def advance(self, seconds: float = 0.0, **delta: float) -> None:
        """Move forward by *seconds* plus any other ``timedelta`` keywords."""
        self._ts += seconds + timedelta(**delta).total_seconds()


def utc_now() -> datetime:
    return datetime.now(UTC)


__all__ = ["Clock", "FrozenClock", "SystemClock", "utc_now"]
