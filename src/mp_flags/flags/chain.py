"""Flags – SourceChain, the ordered walk over the backing sources.

Order is fixed: remote config, then tenant overrides (tenant-scoped key,
then global key), then environment defaults. The first tier that answers
wins and later tiers are not consulted. A tier that fails is logged and
treated exactly like a tier that has no value.
"""
from __future__ import annotations

import dataclasses
import threading
from enum import Enum

from mp_flags.config import FlagConfig
from mp_flags.flags.context import ResolutionContext
from mp_flags.flags.sources.ports import (
    EnvironmentDefaultSource,
    RemoteConfigSource,
    TenantOverrideSource,
)
from mp_flags.kernel.errors import BaseError, TransportError
from mp_flags.kernel.types import Errored, Found, Lookup, NotFound
from mp_flags.observability.logging import get_logger
from mp_flags.resilience.timeouts import TimeoutPolicy

__all__ = ["Resolution", "SourceChain", "Tier", "TierHealth", "tenant_key"]

logger = get_logger(__name__)


class Tier(str, Enum):
    """Where a resolved value came from."""

    CACHE = "cache"
    REMOTE_CONFIG = "remote_config"
    TENANT_OVERRIDE = "tenant_override"
    ENVIRONMENT = "environment"
    DEFAULT = "default"


@dataclasses.dataclass(frozen=True)
class Resolution:
    """Raw string answer of the chain; ``value`` is ``None`` for :attr:`Tier.DEFAULT`."""

    value: str | None
    tier: Tier


@dataclasses.dataclass
class TierHealth:
    lookups: int = 0
    errors: int = 0
    consecutive_errors: int = 0
    last_error: str | None = None


def tenant_key(key: str, tenant_id: str) -> str:
    """Key of a tenant-scoped override in the override store."""
    return f"{key}:tenant:{tenant_id}"


class SourceChain:
    """Queries the configured sources in order until one has a value.

    Any source may be ``None``; it is then skipped.
    """

    def __init__(
        self,
        remote: RemoteConfigSource | None = None,
        overrides: TenantOverrideSource | None = None,
        environment: EnvironmentDefaultSource | None = None,
    ) -> None:
        self._remote = remote
        self._overrides = overrides
        self._environment = environment
        self._health: dict[Tier, TierHealth] = {
            Tier.REMOTE_CONFIG: TierHealth(),
            Tier.TENANT_OVERRIDE: TierHealth(),
        }
        self._health_lock = threading.Lock()

    async def resolve(
        self,
        lookup_key: str,
        env_key: str,
        context: ResolutionContext,
        config: FlagConfig,
    ) -> Resolution:
        """Return the first value found for *lookup_key*.

        *env_key* is the name looked up in the environment tier, which may
        differ from *lookup_key* (variants use ``{FLAG}_VARIANT`` there).
        """
        lookup = await self._from_remote(lookup_key, config)
        if self._settle(Tier.REMOTE_CONFIG, lookup, lookup_key, context):
            return Resolution(lookup.unwrap(), Tier.REMOTE_CONFIG)

        lookup = await self._from_overrides(lookup_key, context, config)
        if self._settle(Tier.TENANT_OVERRIDE, lookup, lookup_key, context):
            return Resolution(lookup.unwrap(), Tier.TENANT_OVERRIDE)

        if self._environment is not None:
            value = self._environment.get(env_key)
            if value is not None:
                return Resolution(value, Tier.ENVIRONMENT)

        return Resolution(None, Tier.DEFAULT)

    def health(self) -> dict[Tier, TierHealth]:
        """Copy of the per-tier lookup counters for the remote tiers."""
        with self._health_lock:
            return {tier: dataclasses.replace(h) for tier, h in self._health.items()}

    # ------------------------------------------------------------------
    # Tiers
    # ------------------------------------------------------------------

    async def _from_remote(self, key: str, config: FlagConfig) -> Lookup[str]:
        remote = self._remote
        if remote is None:
            return NotFound()
        policy = TimeoutPolicy(config.remote_timeout_seconds, Tier.REMOTE_CONFIG.value)
        try:
            value = await policy.execute(lambda: remote.fetch(key))
        except Exception as exc:  # noqa: BLE001
            return Errored(TransportError(Tier.REMOTE_CONFIG.value, cause=exc))
        # an empty string in the profile means "not configured"
        return Found(value) if value else NotFound()

    async def _from_overrides(
        self, key: str, context: ResolutionContext, config: FlagConfig
    ) -> Lookup[str]:
        overrides = self._overrides
        if overrides is None:
            return NotFound()
        policy = TimeoutPolicy(config.remote_timeout_seconds, Tier.TENANT_OVERRIDE.value)
        try:
            if context.tenant_id:
                scoped = tenant_key(key, context.tenant_id)
                value = await policy.execute(lambda: overrides.get(scoped))
                if value is not None:
                    return Found(value)
            value = await policy.execute(lambda: overrides.get(key))
        except Exception as exc:  # noqa: BLE001
            return Errored(TransportError(Tier.TENANT_OVERRIDE.value, cause=exc))
        return Found(value) if value is not None else NotFound()

    def _settle(
        self, tier: Tier, lookup: Lookup[str], key: str, context: ResolutionContext
    ) -> bool:
        """Record *lookup* against *tier*; True when it produced a value."""
        with self._health_lock:
            health = self._health[tier]
            health.lookups += 1
            if isinstance(lookup, Errored):
                health.errors += 1
                health.consecutive_errors += 1
                health.last_error = repr(lookup.cause.__cause__ or lookup.cause)
            else:
                health.consecutive_errors = 0
        if isinstance(lookup, Errored):
            cause = lookup.cause
            fields = cause.log_fields() if isinstance(cause, BaseError) else {"error": repr(cause)}
            logger.warning(
                "flag_source_failed", tier=tier.value, flag_key=key, context=context, **fields
            )
        return lookup.is_found()
