"""Unit tests for FlagBundle – batch resolution with per-flag failure isolation."""

from __future__ import annotations

import asyncio
from enum import Enum

import pytest
from structlog.testing import capture_logs

from mp_flags.aggregation import BundleSummary, FlagBundle, ReadinessLevel
from mp_flags.config import FlagConfig
from mp_flags.flags import FlagResolver, InMemoryRemoteConfigSource, ResolutionContext
from mp_flags.testing.fakes import FakeRemoteConfigSource, FakeTenantOverrideSource

Bundle21 = Enum("Bundle21", {f"FLAG_{i:02d}": f"FLAG_{i:02d}" for i in range(21)})  # type: ignore[misc]


class Tiny(str, Enum):
    ALPHA = "ALPHA"
    BETA = "BETA"
    GAMMA = "GAMMA"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _Evaluator:
    """Evaluator stub: keys in *enabled* are on, keys in *failing* raise."""

    def __init__(self, enabled: set[str] | None = None, failing: set[str] | None = None) -> None:
        self.enabled = enabled or set()
        self.failing = failing or set()
        self.calls: list[str] = []

    async def is_enabled(
        self,
        flag_key: str,
        context: ResolutionContext | None = None,
        config: FlagConfig | None = None,
    ) -> bool:
        self.calls.append(flag_key)
        if flag_key in self.failing:
            raise RuntimeError(f"{flag_key} backend exploded")
        return flag_key in self.enabled

    async def get_variant(
        self,
        flag_key: str,
        context: ResolutionContext | None = None,
        config: FlagConfig | None = None,
    ) -> str:
        return f"{flag_key}-variant"


def _bundle21(enabled: int) -> FlagBundle:
    document = {m.value: "true" for m in list(Bundle21)[:enabled]}
    resolver = FlagResolver(remote=InMemoryRemoteConfigSource(document))
    return FlagBundle(Bundle21, resolver)


# ---------------------------------------------------------------------------
# get_all_flags
# ---------------------------------------------------------------------------


class TestGetAllFlags:
    def test_covers_every_member_once(self) -> None:
        evaluator = _Evaluator(enabled={"BETA"})
        flags = asyncio.run(FlagBundle(Tiny, evaluator).get_all_flags())
        assert flags == {Tiny.ALPHA: False, Tiny.BETA: True, Tiny.GAMMA: False}
        assert evaluator.calls == ["ALPHA", "BETA", "GAMMA"]

    def test_failing_flag_gets_static_default(self) -> None:
        evaluator = _Evaluator(enabled={"ALPHA", "GAMMA"}, failing={"BETA"})
        bundle = FlagBundle(Tiny, evaluator, defaults={Tiny.BETA: True})

        with capture_logs() as logs:
            flags = asyncio.run(bundle.get_all_flags())

        assert flags == {Tiny.ALPHA: True, Tiny.BETA: True, Tiny.GAMMA: True}
        warnings = [e for e in logs if e["event"] == "bundle_flag_failed"]
        assert len(warnings) == 1
        assert warnings[0]["log_level"] == "warning"
        assert warnings[0]["flag_key"] == "BETA"
        assert "exploded" in warnings[0]["error"]

    def test_failure_does_not_stop_the_batch(self) -> None:
        evaluator = _Evaluator(failing={"ALPHA", "BETA"}, enabled={"GAMMA"})
        flags = asyncio.run(FlagBundle(Tiny, evaluator).get_all_flags())
        assert flags[Tiny.GAMMA] is True
        assert evaluator.calls == ["ALPHA", "BETA", "GAMMA"]

    def test_every_backend_unreachable(self) -> None:
        resolver = FlagResolver(
            remote=FakeRemoteConfigSource().fail_with(ConnectionError("no route")),
            overrides=FakeTenantOverrideSource().fail_with(ConnectionError("no route")),
        )
        flags = asyncio.run(FlagBundle(Bundle21, resolver).get_all_flags(ResolutionContext(tenant_id="t")))
        assert set(flags) == set(Bundle21)
        assert len(flags) == 21
        assert not any(flags.values())

    def test_context_and_config_forwarded(self) -> None:
        seen: list[tuple[object, object]] = []

        class _Recording(_Evaluator):
            async def is_enabled(self, flag_key, context=None, config=None):  # type: ignore[override]
                seen.append((context, config))
                return False

        ctx = ResolutionContext(tenant_id="acme")
        cfg = FlagConfig(cache_ttl_seconds=5)
        asyncio.run(FlagBundle(Tiny, _Recording()).get_all_flags(ctx, cfg))
        assert seen == [(ctx, cfg)] * 3


# ---------------------------------------------------------------------------
# Derived views
# ---------------------------------------------------------------------------


class TestDerivedViews:
    def test_has_any_enabled(self) -> None:
        assert asyncio.run(FlagBundle(Tiny, _Evaluator()).has_any_enabled()) is False
        assert asyncio.run(FlagBundle(Tiny, _Evaluator(enabled={"GAMMA"})).has_any_enabled()) is True

    @pytest.mark.parametrize(
        ("enabled", "expected"),
        [
            (0, ReadinessLevel.NONE),
            (1, ReadinessLevel.BASIC),
            (6, ReadinessLevel.ADVANCED),
            (16, ReadinessLevel.ENTERPRISE),
            (21, ReadinessLevel.ENTERPRISE),
        ],
    )
    def test_readiness_through_resolver(self, enabled: int, expected: ReadinessLevel) -> None:
        assert asyncio.run(_bundle21(enabled).get_readiness_level()) is expected

    def test_summary(self) -> None:
        summary = asyncio.run(_bundle21(6).get_summary())
        assert isinstance(summary, BundleSummary)
        assert summary.enabled_count == 6
        assert summary.readiness_level is ReadinessLevel.ADVANCED
        assert summary.has_any_enabled is True
        assert len(summary.flags) == 21

    def test_summary_to_dict(self) -> None:
        summary = asyncio.run(FlagBundle(Tiny, _Evaluator(enabled={"ALPHA"})).get_summary())
        assert summary.to_dict() == {
            "flags": {"ALPHA": True, "BETA": False, "GAMMA": False},
            "enabled_count": 1,
            "readiness_level": "advanced",
            "has_any_enabled": True,
        }

    def test_any_enabled_is_logical_or(self) -> None:
        bundle = FlagBundle(Tiny, _Evaluator(enabled={"BETA"}))
        assert asyncio.run(bundle.any_enabled(Tiny.ALPHA, Tiny.BETA)) is True
        assert asyncio.run(bundle.any_enabled(Tiny.ALPHA, Tiny.GAMMA)) is False

    def test_get_variant(self) -> None:
        bundle = FlagBundle(Tiny, _Evaluator())
        assert asyncio.run(bundle.get_variant(Tiny.BETA)) == "BETA-variant"


class TestDeclaration:
    def test_empty_enum_rejected(self) -> None:
        class Empty(str, Enum):
            pass

        with pytest.raises(ValueError):
            FlagBundle(Empty, _Evaluator())

    def test_defaults_for_undeclared_flag_rejected(self) -> None:
        class Other(str, Enum):
            X = "X"

        with pytest.raises(ValueError):
            FlagBundle(Tiny, _Evaluator(), defaults={Other.X: True})  # type: ignore[dict-item]

    def test_default_for(self) -> None:
        bundle = FlagBundle(Tiny, _Evaluator(), defaults={Tiny.GAMMA: True})
        assert bundle.default_for(Tiny.ALPHA) is False
        assert bundle.default_for(Tiny.GAMMA) is True
        assert bundle.members == (Tiny.ALPHA, Tiny.BETA, Tiny.GAMMA)
