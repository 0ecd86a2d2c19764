"""Unit tests for TimeoutPolicy."""

from __future__ import annotations

import asyncio

import pytest

from mp_flags.kernel.errors import InfrastructureTimeoutError
from mp_flags.resilience import TimeoutPolicy


class TestTimeoutPolicy:
    def test_returns_result_within_deadline(self) -> None:
        async def fast() -> str:
            return "true"

        assert asyncio.run(TimeoutPolicy(1.0).execute(fast)) == "true"

    def test_raises_infrastructure_timeout(self) -> None:
        async def slow() -> str:
            await asyncio.sleep(10)
            return "never"

        with pytest.raises(InfrastructureTimeoutError) as exc_info:
            asyncio.run(TimeoutPolicy(0.01, "remote_config").execute(slow))
        assert exc_info.value.message == "remote_config timed out after 0.01s"
        assert exc_info.value.detail == {"operation": "remote_config", "timeout_seconds": 0.01}

    def test_other_errors_propagate(self) -> None:
        async def broken() -> str:
            raise OSError("connection reset")

        with pytest.raises(OSError):
            asyncio.run(TimeoutPolicy(1.0).execute(broken))
