"""Flags – resolution of feature flags and variants per tenant/client."""
from mp_flags.flags.cache import CacheKey, CacheStats, FlagCacheStore, InMemoryFlagCache
from mp_flags.flags.chain import Resolution, SourceChain, Tier, TierHealth
from mp_flags.flags.context import GLOBAL_CONTEXT, ResolutionContext
from mp_flags.flags.resolver import DEFAULT_VARIANT, FlagResolver
from mp_flags.flags.sources import (
    EnvironmentDefaultSource,
    EnvironSource,
    InMemoryRemoteConfigSource,
    InMemoryTenantOverrideSource,
    RemoteConfigSource,
    TenantOverrideSource,
)
from mp_flags.flags.tenancy import FlagSource, TenantFlagResolver, TenantFlagResult, TenantFlagStats

__all__ = [
    "CacheKey",
    "CacheStats",
    "DEFAULT_VARIANT",
    "EnvironSource",
    "EnvironmentDefaultSource",
    "FlagCacheStore",
    "FlagResolver",
    "FlagSource",
    "GLOBAL_CONTEXT",
    "InMemoryFlagCache",
    "InMemoryRemoteConfigSource",
    "InMemoryTenantOverrideSource",
    "RemoteConfigSource",
    "Resolution",
    "ResolutionContext",
    "SourceChain",
    "TenantFlagResolver",
    "TenantFlagResult",
    "TenantFlagStats",
    "TenantOverrideSource",
    "Tier",
    "TierHealth",
]
