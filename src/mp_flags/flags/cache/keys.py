"""Flags cache – CacheKey builder."""
from __future__ import annotations

from urllib.parse import quote

from mp_flags.flags.context import ResolutionContext

__all__ = ["CacheKey"]


def _part(value: str) -> str:
    # ``|`` and ``:`` are separators, escape them (and ``%``) inside values
    return quote(value, safe="")


class CacheKey:
    """Factory for composite cache keys.

    Keys encode ``(flag_key, tenant_id, client_id)`` without ambiguity::

        flag:BETA_UI|tenant:acme|client:web
        variant:BETA_UI_variant|tenant:acme
    """

    FLAG_NAMESPACE = "flag"
    VARIANT_NAMESPACE = "variant"

    @staticmethod
    def compose(namespace: str, lookup_key: str, context: ResolutionContext) -> str:
        parts = [f"{namespace}:{_part(lookup_key)}"]
        if context.tenant_id:
            parts.append(f"tenant:{_part(context.tenant_id)}")
        if context.client_id:
            parts.append(f"client:{_part(context.client_id)}")
        return "|".join(parts)

    @classmethod
    def for_flag(cls, flag_key: str, context: ResolutionContext) -> str:
        return cls.compose(cls.FLAG_NAMESPACE, flag_key, context)

    @classmethod
    def for_variant(cls, flag_key: str, context: ResolutionContext) -> str:
        return cls.compose(cls.VARIANT_NAMESPACE, f"{flag_key}_variant", context)
