"""Flags – process-wide convenience API.

Thin module-level wrappers around one shared :class:`FlagResolver` so
call sites can write ``await flags.is_enabled("BETA_UI", ctx)``. The
shared resolver is built on first use from ``FLAGS_*`` environment
settings with the AWS adapters, unless :func:`configure` installed one.
"""
from __future__ import annotations

import threading

from mp_flags.config import FlagConfig
from mp_flags.flags.cache import CacheStats
from mp_flags.flags.context import ResolutionContext
from mp_flags.flags.resolver import FlagResolver
from mp_flags.flags.sources import EnvironSource

__all__ = [
    "clear_cache",
    "configure",
    "get_cache_stats",
    "get_resolver",
    "get_variant",
    "is_enabled",
]

_resolver: FlagResolver | None = None
_lock = threading.Lock()


def _build_default() -> FlagResolver:
    from mp_flags.adapters.aws import AppConfigRemoteSource, DynamoTenantOverrideSource

    config = FlagConfig.from_env()
    return FlagResolver(
        remote=AppConfigRemoteSource(config),
        overrides=DynamoTenantOverrideSource(config),
        environment=EnvironSource(),
        config=config,
    )


def configure(resolver: FlagResolver | None) -> None:
    """Install *resolver* as the shared one (``None`` resets to lazy default)."""
    global _resolver
    with _lock:
        _resolver = resolver


def get_resolver() -> FlagResolver:
    global _resolver
    with _lock:
        if _resolver is None:
            _resolver = _build_default()
        return _resolver


async def is_enabled(
    flag_key: str,
    context: ResolutionContext | None = None,
    config: FlagConfig | None = None,
) -> bool:
    return await get_resolver().is_enabled(flag_key, context, config)


async def get_variant(
    flag_key: str,
    context: ResolutionContext | None = None,
    config: FlagConfig | None = None,
) -> str:
    return await get_resolver().get_variant(flag_key, context, config)


def clear_cache() -> None:
    get_resolver().clear_cache()


def get_cache_stats() -> CacheStats:
    return get_resolver().get_cache_stats()
