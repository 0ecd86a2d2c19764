"""Flags sources – dict-backed remote config and override sources."""
from __future__ import annotations


class InMemoryRemoteConfigSource:
    """Remote config profile held in a plain ``dict`` (local development)."""

    def __init__(self, document: dict[str, str] | None = None) -> None:
        self._document: dict[str, str] = dict(document or {})

    def put(self, key: str, value: str) -> None:
        self._document[key] = value

    async def fetch(self, key: str) -> str | None:
        return self._document.get(key)


class InMemoryTenantOverrideSource:
    """Override store held in a plain ``dict``."""

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._overrides: dict[str, str] = dict(overrides or {})

    def put(self, key: str, value: str, *, tenant_id: str | None = None) -> None:
        """Store a global override, or a tenant-scoped one when *tenant_id* is given."""
        if tenant_id is not None:
            key = f"{key}:tenant:{tenant_id}"
        self._overrides[key] = value

    async def get(self, key: str) -> str | None:
        return self._overrides.get(key)


__all__ = ["InMemoryRemoteConfigSource", "InMemoryTenantOverrideSource"]
