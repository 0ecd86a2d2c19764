"""Flags sources – RemoteConfigSource, TenantOverrideSource, EnvironmentDefaultSource ports."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RemoteConfigSource(Protocol):
    """Port: centrally distributed configuration profile.

    Returns ``None`` when the key is absent. May raise on transport or
    decoding failures; the resolution chain treats that as "not found".
    """

    async def fetch(self, key: str) -> str | None: ...


@runtime_checkable
class TenantOverrideSource(Protocol):
    """Port: key-value store of per-tenant and global overrides.

    Keys are either the bare flag key or ``{flag_key}:tenant:{tenant_id}``.
    """

    async def get(self, key: str) -> str | None: ...


@runtime_checkable
class EnvironmentDefaultSource(Protocol):
    """Port: process-local static defaults. Synchronous, must not raise."""

    def get(self, key: str) -> str | None: ...


__all__ = ["EnvironmentDefaultSource", "RemoteConfigSource", "TenantOverrideSource"]
