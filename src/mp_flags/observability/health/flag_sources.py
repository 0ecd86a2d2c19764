"""Observability – health of the sources behind the flag resolution chain."""
from __future__ import annotations

from typing import TYPE_CHECKING

from mp_flags.observability.health.check import HealthCheck, HealthStatus

if TYPE_CHECKING:
    from mp_flags.flags.chain import SourceChain

__all__ = ["FlagSourcesHealthCheck"]


class FlagSourcesHealthCheck(HealthCheck):
    """Reports degraded once a source tier keeps failing.

    Flag lookups never surface source failures to callers, so a broken
    backend otherwise only shows up as flags silently resolving to their
    defaults. A tier is degraded after ``threshold`` consecutive errored
    lookups; one successful lookup resets it.
    """

    def __init__(self, chain: "SourceChain", threshold: int = 3) -> None:
        if threshold < 1:
            raise ValueError("threshold must be >= 1")
        self._chain = chain
        self._threshold = threshold

    @property
    def name(self) -> str:
        return "flag_sources"

    async def check(self) -> HealthStatus:
        degraded = [
            f"{tier.value} ({health.consecutive_errors} consecutive errors: {health.last_error})"
            for tier, health in self._chain.health().items()
            if health.consecutive_errors >= self._threshold
        ]
        if degraded:
            return HealthStatus(healthy=False, detail="degraded: " + "; ".join(degraded))
        return HealthStatus(healthy=True)
