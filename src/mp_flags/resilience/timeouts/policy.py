"""Resilience – TimeoutPolicy."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Awaitable, Callable, TypeVar

from mp_flags.kernel.errors import InfrastructureTimeoutError

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class TimeoutPolicy:
    """Deadline for one awaited call; *operation* names it in the error."""

    timeout_seconds: float
    operation: str = "operation"

    async def execute(self, func: Callable[[], Awaitable[T]]) -> T:
        try:
            return await asyncio.wait_for(func(), timeout=self.timeout_seconds)
        except TimeoutError as exc:
            raise InfrastructureTimeoutError(
                f"{self.operation} timed out after {self.timeout_seconds}s",
                detail={"operation": self.operation, "timeout_seconds": self.timeout_seconds},
            ) from exc


__all__ = ["TimeoutPolicy"]
