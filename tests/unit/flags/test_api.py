"""Unit tests for the module-level flag API."""

from __future__ import annotations

import asyncio
from collections.abc import Iterator

import pytest

from mp_flags.flags import EnvironSource, FlagResolver, ResolutionContext, api
from mp_flags.testing.fakes import FakeTenantOverrideSource


@pytest.fixture
def overrides() -> Iterator[FakeTenantOverrideSource]:
    source = FakeTenantOverrideSource({"F:tenant:acme": "true", "F_variant": "blue"})
    api.configure(FlagResolver(overrides=source, environment=EnvironSource({})))
    yield source
    api.configure(None)


class TestModuleApi:
    def test_is_enabled_delegates(self, overrides: FakeTenantOverrideSource) -> None:
        assert asyncio.run(api.is_enabled("F", ResolutionContext(tenant_id="acme"))) is True
        assert asyncio.run(api.is_enabled("F")) is False

    def test_get_variant_delegates(self, overrides: FakeTenantOverrideSource) -> None:
        assert asyncio.run(api.get_variant("F")) == "blue"

    def test_cache_stats_and_clear(self, overrides: FakeTenantOverrideSource) -> None:
        asyncio.run(api.is_enabled("F"))
        assert api.get_cache_stats().keys == ["flag:F"]
        api.clear_cache()
        assert api.get_cache_stats().size == 0

    def test_configure_none_rebuilds_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLAGS_CACHE_TTL_SECONDS", "5")
        monkeypatch.setenv("FLAGS_REGION", "eu-west-1")
        api.configure(None)
        try:
            resolver = api.get_resolver()
            assert resolver.config.cache_ttl_seconds == 5.0
            assert resolver.config.region == "eu-west-1"
            assert api.get_resolver() is resolver
        finally:
            api.configure(None)
