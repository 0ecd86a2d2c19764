"""Flags – FlagResolver, the public evaluation surface."""
from __future__ import annotations

from mp_flags.config import FlagConfig
from mp_flags.flags.cache import CacheKey, CacheStats, FlagCacheStore, InMemoryFlagCache
from mp_flags.flags.chain import Resolution, SourceChain, Tier
from mp_flags.flags.context import GLOBAL_CONTEXT, ResolutionContext
from mp_flags.flags.sources.ports import (
    EnvironmentDefaultSource,
    RemoteConfigSource,
    TenantOverrideSource,
)
from mp_flags.observability.logging import get_logger
from mp_flags.resilience.cache import CacheAsidePolicy

__all__ = ["DEFAULT_VARIANT", "FlagResolver"]

logger = get_logger(__name__)

DEFAULT_VARIANT = "default"


class FlagResolver:
    """Resolve boolean flags and variants through cache and source chain.

    Resolution order: cache, remote config, tenant overrides (tenant key
    then global key), environment defaults, hard default (``False`` for
    flags, ``"default"`` for variants). Whatever answers, including the
    hard default, is cached for ``config.cache_ttl_seconds`` so repeated
    lookups inside the TTL never reach the sources.

    Usage::

        resolver = FlagResolver(
            remote=AppConfigRemoteSource(config),
            overrides=DynamoTenantOverrideSource(config),
            environment=EnvironSource(),
            config=config,
        )
        if await resolver.is_enabled("BETA_UI", ResolutionContext(tenant_id="acme")):
            ...

    A per-call *config* replaces the resolver's own for that call only.
    """

    def __init__(
        self,
        remote: RemoteConfigSource | None = None,
        overrides: TenantOverrideSource | None = None,
        environment: EnvironmentDefaultSource | None = None,
        *,
        cache: FlagCacheStore | None = None,
        config: FlagConfig | None = None,
    ) -> None:
        self._chain = SourceChain(remote, overrides, environment)
        self._cache: FlagCacheStore = cache if cache is not None else InMemoryFlagCache()
        self._config = config or FlagConfig()
        self._aside: CacheAsidePolicy[bool | str] = CacheAsidePolicy(self._cache)

    @property
    def chain(self) -> SourceChain:
        return self._chain

    @property
    def config(self) -> FlagConfig:
        return self._config

    async def is_enabled(
        self,
        flag_key: str,
        context: ResolutionContext | None = None,
        config: FlagConfig | None = None,
    ) -> bool:
        """Return whether *flag_key* is on; only the string ``"true"`` enables."""
        ctx = context or GLOBAL_CONTEXT
        cfg = config or self._config

        async def load() -> bool:
            resolution = await self._chain.resolve(flag_key, flag_key, ctx, cfg)
            self._log_resolution(flag_key, ctx, resolution)
            return resolution.value == "true"

        value = await self._aside.get_or_load(
            CacheKey.for_flag(flag_key, ctx),
            load,
            cfg.cache_ttl_seconds,
            coalesce=cfg.coalesce_requests,
        )
        return value is True

    async def get_variant(
        self,
        flag_key: str,
        context: ResolutionContext | None = None,
        config: FlagConfig | None = None,
    ) -> str:
        """Return the A/B variant name for *flag_key*, ``"default"`` when unset.

        Remote config and overrides are read under ``{flag_key}_variant``;
        the environment tier reads ``{flag_key}_VARIANT``.
        """
        ctx = context or GLOBAL_CONTEXT
        cfg = config or self._config
        lookup_key = f"{flag_key}_variant"

        async def load() -> str:
            resolution = await self._chain.resolve(lookup_key, f"{flag_key}_VARIANT", ctx, cfg)
            self._log_resolution(lookup_key, ctx, resolution)
            return resolution.value or DEFAULT_VARIANT

        value = await self._aside.get_or_load(
            CacheKey.for_variant(flag_key, ctx),
            load,
            cfg.cache_ttl_seconds,
            coalesce=cfg.coalesce_requests,
        )
        return str(value)

    def clear_cache(self) -> None:
        """Drop every cached value; the next lookup walks the chain again."""
        size = len(self._cache)
        self._cache.clear()
        logger.info("flag_cache_cleared", entries=size)

    def get_cache_stats(self) -> CacheStats:
        keys = self._cache.keys()
        return CacheStats(size=len(keys), keys=keys)

    def _log_resolution(self, key: str, ctx: ResolutionContext, resolution: Resolution) -> None:
        logger.debug(
            "flag_resolved",
            flag_key=key,
            context=ctx,
            tier=resolution.tier.value,
            fallback=resolution.tier is Tier.DEFAULT,
        )
