"""Flags sources – ports for the backends a flag value is read from."""
from mp_flags.flags.sources.environ import EnvironSource
from mp_flags.flags.sources.in_memory import InMemoryRemoteConfigSource, InMemoryTenantOverrideSource
from mp_flags.flags.sources.ports import (
    EnvironmentDefaultSource,
    RemoteConfigSource,
    TenantOverrideSource,
)

__all__ = [
    "EnvironSource",
    "EnvironmentDefaultSource",
    "InMemoryRemoteConfigSource",
    "InMemoryTenantOverrideSource",
    "RemoteConfigSource",
    "TenantOverrideSource",
]
