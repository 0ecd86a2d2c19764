"""Flags – ResolutionContext value object."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class ResolutionContext:
    """Who a flag is being resolved for.

    Both fields are optional; without ``tenant_id`` only global values are
    consulted. Callers pass an already-authenticated context; nothing here
    checks identity.
    """

    tenant_id: str | None = None
    client_id: str | None = None


GLOBAL_CONTEXT = ResolutionContext()

__all__ = ["GLOBAL_CONTEXT", "ResolutionContext"]
