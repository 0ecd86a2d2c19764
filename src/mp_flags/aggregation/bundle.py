"""Aggregation – FlagBundle, batch resolution of a closed set of flags."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Generic, Mapping, Protocol, TypeVar

from mp_flags.aggregation.readiness import ReadinessLevel, classify_readiness
from mp_flags.config import FlagConfig
from mp_flags.flags.context import ResolutionContext
from mp_flags.observability.logging import get_logger

__all__ = ["BundleSummary", "FlagBundle", "FlagEvaluator"]

logger = get_logger(__name__)

F = TypeVar("F", bound=Enum)


class FlagEvaluator(Protocol):
    """The part of :class:`~mp_flags.flags.FlagResolver` a bundle relies on."""

    async def is_enabled(
        self,
        flag_key: str,
        context: ResolutionContext | None = None,
        config: FlagConfig | None = None,
    ) -> bool: ...

    async def get_variant(
        self,
        flag_key: str,
        context: ResolutionContext | None = None,
        config: FlagConfig | None = None,
    ) -> str: ...


@dataclasses.dataclass(frozen=True)
class BundleSummary(Generic[F]):
    flags: dict[F, bool]
    enabled_count: int
    readiness_level: ReadinessLevel
    has_any_enabled: bool

    def to_dict(self) -> dict[str, object]:
        return {
            "flags": {member.value: on for member, on in self.flags.items()},
            "enabled_count": self.enabled_count,
            "readiness_level": self.readiness_level.value,
            "has_any_enabled": self.has_any_enabled,
        }


class FlagBundle(Generic[F]):
    """A closed set of boolean flags declared as an ``Enum``.

    Member values are the flag keys. A flag whose evaluation raises is
    logged and replaced by its static default; the rest of the batch is
    still resolved, so results always hold every member exactly once.
    """

    def __init__(
        self,
        flags: type[F],
        evaluator: FlagEvaluator,
        defaults: Mapping[F, bool] | None = None,
    ) -> None:
        self._members: tuple[F, ...] = tuple(flags)
        if not self._members:
            raise ValueError(f"{flags.__name__} declares no flags")
        self._evaluator = evaluator
        self._defaults: dict[F, bool] = {m: False for m in self._members}
        if defaults:
            unknown = [m for m in defaults if m not in self._defaults]
            if unknown:
                raise ValueError(f"defaults for undeclared flags: {unknown}")
            self._defaults.update(defaults)

    @property
    def members(self) -> tuple[F, ...]:
        return self._members

    def default_for(self, flag: F) -> bool:
        return self._defaults[flag]

    async def is_enabled(
        self,
        flag: F,
        context: ResolutionContext | None = None,
        config: FlagConfig | None = None,
    ) -> bool:
        try:
            return await self._evaluator.is_enabled(flag.value, context, config)
        except Exception as exc:  # noqa: BLE001
            default = self._defaults[flag]
            logger.warning(
                "bundle_flag_failed",
                flag_key=flag.value,
                context=context,
                default=default,
                error=repr(exc),
            )
            return default

    async def get_all_flags(
        self,
        context: ResolutionContext | None = None,
        config: FlagConfig | None = None,
    ) -> dict[F, bool]:
        return {member: await self.is_enabled(member, context, config) for member in self._members}

    async def any_enabled(
        self,
        *flags: F,
        context: ResolutionContext | None = None,
        config: FlagConfig | None = None,
    ) -> bool:
        """Logical OR over *flags*; every flag is still evaluated."""
        results = [await self.is_enabled(flag, context, config) for flag in flags]
        return any(results)

    async def has_any_enabled(
        self,
        context: ResolutionContext | None = None,
        config: FlagConfig | None = None,
    ) -> bool:
        return any((await self.get_all_flags(context, config)).values())

    async def get_readiness_level(
        self,
        context: ResolutionContext | None = None,
        config: FlagConfig | None = None,
    ) -> ReadinessLevel:
        flags = await self.get_all_flags(context, config)
        return classify_readiness(sum(flags.values()), len(flags))

    async def get_summary(
        self,
        context: ResolutionContext | None = None,
        config: FlagConfig | None = None,
    ) -> BundleSummary[F]:
        flags = await self.get_all_flags(context, config)
        enabled_count = sum(flags.values())
        return BundleSummary(
            flags=flags,
            enabled_count=enabled_count,
            readiness_level=classify_readiness(enabled_count, len(flags)),
            has_any_enabled=enabled_count > 0,
        )

    async def get_variant(
        self,
        flag: F,
        context: ResolutionContext | None = None,
        config: FlagConfig | None = None,
    ) -> str:
        return await self._evaluator.get_variant(flag.value, context, config)
