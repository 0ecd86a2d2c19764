"""Aggregation – bundles of related flags and their readiness level."""
from mp_flags.aggregation.ai import AI_FLAG_DEFAULTS, AIFeatureFlag, AIFeatureFlags, AIFlagCategory
from mp_flags.aggregation.bundle import BundleSummary, FlagBundle, FlagEvaluator
from mp_flags.aggregation.readiness import ReadinessLevel, classify_readiness

__all__ = [
    "AIFeatureFlag",
    "AIFeatureFlags",
    "AIFlagCategory",
    "AI_FLAG_DEFAULTS",
    "BundleSummary",
    "FlagBundle",
    "FlagEvaluator",
    "ReadinessLevel",
    "classify_readiness",
]
