"""Aggregation – ReadinessLevel classification."""
from __future__ import annotations

from enum import Enum

__all__ = ["ReadinessLevel", "classify_readiness"]


class ReadinessLevel(str, Enum):
    NONE = "none"
    BASIC = "basic"
    ADVANCED = "advanced"
    ENTERPRISE = "enterprise"


def classify_readiness(enabled: int, total: int) -> ReadinessLevel:
    """Map the enabled share of a bundle to a :class:`ReadinessLevel`.

    ``0`` -> none, ``(0, 0.25)`` -> basic, ``[0.25, 0.75)`` -> advanced,
    ``[0.75, 1]`` -> enterprise. An empty bundle is ``none``.
    """
    if enabled < 0 or total < 0 or enabled > total:
        raise ValueError(f"invalid counts: {enabled} enabled of {total}")
    if total == 0 or enabled == 0:
        return ReadinessLevel.NONE
    ratio = enabled / total
    if ratio < 0.25:
        return ReadinessLevel.BASIC
    if ratio < 0.75:
        return ReadinessLevel.ADVANCED
    return ReadinessLevel.ENTERPRISE
