"""Testing fakes – in-memory doubles for flag sources and time."""
from mp_flags.testing.fakes.clock import EPOCH, FakeClock
from mp_flags.testing.fakes.sources import FakeRemoteConfigSource, FakeTenantOverrideSource

__all__ = [
    "EPOCH",
    "FakeClock",
    "FakeRemoteConfigSource",
    "FakeTenantOverrideSource",
]
