"""Unit tests for kernel clocks."""

from __future__ import annotations

from datetime import UTC, datetime

from mp_flags.kernel.time import FrozenClock, SystemClock, utc_now


class TestClocks:
    def test_system_clock_is_utc(self) -> None:
        assert SystemClock().now().tzinfo is UTC

    def test_frozen_clock_advance(self) -> None:
        clock = FrozenClock(datetime(2026, 1, 1, tzinfo=UTC))
        before = clock.timestamp()
        clock.advance(seconds=90)
        assert clock.timestamp() - before == 90
        assert clock.now() == datetime(2026, 1, 1, 0, 1, 30, tzinfo=UTC)

    def test_utc_now(self) -> None:
        assert utc_now().tzinfo is UTC

    def test_frozen_clock_from_epoch_seconds(self) -> None:
        clock = FrozenClock(100.0)
        clock.advance(minutes=1)
        clock.advance(0.5)
        assert clock.timestamp() == 160.5

    def test_system_clock_timestamp_moves(self) -> None:
        clock = SystemClock()
        assert clock.timestamp() <= SystemClock().timestamp()
