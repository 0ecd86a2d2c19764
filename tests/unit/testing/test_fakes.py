"""Unit tests for the testing fakes."""

from __future__ import annotations

import asyncio

import pytest

from mp_flags.flags.sources import RemoteConfigSource, TenantOverrideSource
from mp_flags.testing.fakes import EPOCH, FakeClock, FakeRemoteConfigSource, FakeTenantOverrideSource


class TestFakeSources:
    def test_remote_records_calls(self) -> None:
        remote = FakeRemoteConfigSource({"BETA_UI": "true"})
        assert asyncio.run(remote.fetch("BETA_UI")) == "true"
        assert asyncio.run(remote.fetch("OTHER")) is None
        assert remote.calls == ["BETA_UI", "OTHER"]

    def test_put_is_chainable(self) -> None:
        overrides = FakeTenantOverrideSource().put("A", "true").put("B", "false")
        assert asyncio.run(overrides.get("B")) == "false"

    def test_fail_with_raises_and_reset_clears(self) -> None:
        overrides = FakeTenantOverrideSource({"A": "true"}).fail_with(OSError("down"))
        with pytest.raises(OSError):
            asyncio.run(overrides.get("A"))
        overrides.reset()
        assert overrides.calls == []
        assert asyncio.run(overrides.get("A")) == "true"

    def test_hang_sleeps(self) -> None:
        remote = FakeRemoteConfigSource({"A": "true"}).hang(0.01)
        assert asyncio.run(remote.fetch("A")) == "true"

    def test_satisfy_ports(self) -> None:
        assert isinstance(FakeRemoteConfigSource(), RemoteConfigSource)
        assert isinstance(FakeTenantOverrideSource(), TenantOverrideSource)


class TestFakeClock:
    def test_pinned_time(self) -> None:
        clock = FakeClock()
        assert clock.now().isoformat() == "2026-01-01T12:00:00+00:00"

    def test_elapsed_tracks_advance(self) -> None:
        clock = FakeClock()
        clock.advance(seconds=30)
        assert clock.elapsed() == 30
        assert clock.now() > EPOCH
