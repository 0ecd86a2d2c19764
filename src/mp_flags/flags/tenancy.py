"""Flags – TenantFlagResolver, synchronous capability flags with provenance.

Capability checks in request handlers often need to know *why* a tenant
has a capability, not just whether it does. This resolver reads the
process environment only (no remote sources, no cache) and reports the
tier that answered: ``tenant`` -> ``global`` -> ``default``.
"""
from __future__ import annotations

import dataclasses
import os
from enum import Enum
from typing import Iterable, Mapping

from mp_flags.flags.chain import tenant_key
from mp_flags.flags.context import GLOBAL_CONTEXT, ResolutionContext

__all__ = [
    "CAPABILITY_DEFAULTS",
    "FlagSource",
    "TenantFlagResolver",
    "TenantFlagResult",
    "TenantFlagStats",
]

CAPABILITY_DEFAULTS: Mapping[str, bool] = {
    "CAP_MESSAGING_ENABLED": False,
    "CAP_DATALAKE_ENABLED": False,
    "ONBOARDING_V2_ENABLED": False,
    "CAP_AUTH_JWT_ALLOWED": True,
    "CAP_AUTH_IAM_ALLOWED": True,
}

_GLOBAL_PREFIXES = ("CAP_", "ONBOARDING_")


class FlagSource(str, Enum):
    TENANT = "tenant"
    GLOBAL = "global"
    DEFAULT = "default"


@dataclasses.dataclass(frozen=True)
class TenantFlagResult:
    value: bool | str
    source: FlagSource
    degraded: bool = False


@dataclasses.dataclass(frozen=True)
class TenantFlagStats:
    tenant_overrides: int = 0
    global_flags: int = 0
    defaults: int = 0


def _parse(raw: str) -> bool | str:
    if raw == "true":
        return True
    if raw == "false":
        return False
    return raw


class TenantFlagResolver:
    """Resolve flags from environment variables with tenant > global > default."""

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        defaults: Mapping[str, bool] | None = None,
    ) -> None:
        self._environ = environ
        self._defaults = dict(CAPABILITY_DEFAULTS if defaults is None else defaults)

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def resolve(self, flag_key: str, context: ResolutionContext | None = None) -> TenantFlagResult:
        ctx = context or GLOBAL_CONTEXT
        environ = self.environ
        if ctx.tenant_id:
            raw = environ.get(tenant_key(flag_key, ctx.tenant_id))
            if raw is not None:
                return TenantFlagResult(_parse(raw), FlagSource.TENANT)
        raw = environ.get(flag_key)
        if raw is not None:
            return TenantFlagResult(_parse(raw), FlagSource.GLOBAL)
        return TenantFlagResult(self._defaults.get(flag_key, False), FlagSource.DEFAULT)

    def resolve_many(
        self, flag_keys: Iterable[str], context: ResolutionContext | None = None
    ) -> dict[str, TenantFlagResult]:
        return {key: self.resolve(key, context) for key in flag_keys}

    def stats(self, tenant_id: str | None) -> TenantFlagStats:
        """Count tenant overrides and global capability flags set in the environment.

        ``defaults`` is the number of known capability flags that neither a
        tenant override nor a global value covers for *tenant_id*.
        """
        if not tenant_id:
            return TenantFlagStats()
        environ = self.environ
        marker = f":tenant:{tenant_id}"
        tenant_overrides = sum(1 for key in environ if key.endswith(marker))
        global_flags = sum(
            1 for key in environ if ":tenant:" not in key and key.startswith(_GLOBAL_PREFIXES)
        )
        defaults = sum(
            1
            for key in self._defaults
            if key not in environ and tenant_key(key, tenant_id) not in environ
        )
        return TenantFlagStats(tenant_overrides, global_flags, defaults)
