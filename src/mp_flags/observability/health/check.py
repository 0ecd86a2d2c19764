"""Observability health – HealthCheck base and HealthStatus."""
from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Any

__all__ = ["HealthCheck", "HealthStatus"]


@dataclass
class HealthStatus:
    """Outcome of one probe; ``detail`` says what is degraded when unhealthy."""

    healthy: bool
    detail: str | None = None
    latency_ms: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class HealthCheck(ABC):
    """A named probe a host service can expose next to its own readiness checks."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    async def check(self) -> HealthStatus: ...

    async def timed_check(self) -> HealthStatus:
        """:meth:`check` with ``latency_ms`` filled in; raising counts as unhealthy."""
        started = time.monotonic()
        try:
            status = await self.check()
        except Exception as exc:  # noqa: BLE001
            status = HealthStatus(healthy=False, detail=f"{self.name} check failed: {exc!r}")
        status.latency_ms = (time.monotonic() - started) * 1000
        return status
