"""Aggregation – the AI capability flag bundle."""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from mp_flags.aggregation.bundle import FlagBundle, FlagEvaluator
from mp_flags.config import FlagConfig
from mp_flags.flags.context import ResolutionContext

__all__ = ["AIFeatureFlag", "AIFeatureFlags", "AIFlagCategory", "AI_FLAG_DEFAULTS"]


class AIFlagCategory(str, Enum):
    DOCUMENT_ANALYSIS = "document_analysis"
    CONNECTORS = "connectors"
    OBSERVABILITY = "observability"
    ONBOARDING = "onboarding"
    CROSS_SELL = "cross_sell"
    BUSINESS_INTELLIGENCE = "business_intelligence"
    ADVANCED = "advanced"


class AIFeatureFlag(str, Enum):
    # Document analysis
    AI_DOCS_ENABLED = "AI_DOCS_ENABLED"
    AI_STACK_SUGGESTIONS_ENABLED = "AI_STACK_SUGGESTIONS_ENABLED"
    AI_GAP_ANALYSIS_ENABLED = "AI_GAP_ANALYSIS_ENABLED"
    AI_CROSS_SELL_ENABLED = "AI_CROSS_SELL_ENABLED"

    # Connectors and industry templates
    CONNECTOR_LIBRARY_ENABLED = "CONNECTOR_LIBRARY_ENABLED"
    INDUSTRY_TEMPLATES_ENABLED = "INDUSTRY_TEMPLATES_ENABLED"
    AUTO_BACKLOG_ENABLED = "AUTO_BACKLOG_ENABLED"

    # Observability and analytics
    OBSERVABILITY_ENABLED = "OBSERVABILITY_ENABLED"
    AI_INSIGHTS_DASHBOARD_ENABLED = "AI_INSIGHTS_DASHBOARD_ENABLED"
    USAGE_ANALYTICS_ENABLED = "USAGE_ANALYTICS_ENABLED"

    # Onboarding
    AI_ONBOARDING_RECOMMENDATIONS_ENABLED = "AI_ONBOARDING_RECOMMENDATIONS_ENABLED"
    SMART_CONNECTOR_PREFILL_ENABLED = "SMART_CONNECTOR_PREFILL_ENABLED"
    PAIN_POINT_DETECTION_ENABLED = "PAIN_POINT_DETECTION_ENABLED"

    # Cross-sell and upsell
    LIFECYCLE_CROSS_SELL_ENABLED = "LIFECYCLE_CROSS_SELL_ENABLED"
    USAGE_BASED_UPSELL_ENABLED = "USAGE_BASED_UPSELL_ENABLED"
    RETENTION_RISK_DETECTION_ENABLED = "RETENTION_RISK_DETECTION_ENABLED"

    # Business intelligence
    BI_DASHBOARD_ENABLED = "BI_DASHBOARD_ENABLED"
    INDUSTRY_BENCHMARKING_ENABLED = "INDUSTRY_BENCHMARKING_ENABLED"
    QUARTERLY_HEALTH_REPORTS_ENABLED = "QUARTERLY_HEALTH_REPORTS_ENABLED"

    # Advanced
    BUSINESS_MATURITY_ANALYSIS_ENABLED = "BUSINESS_MATURITY_ANALYSIS_ENABLED"
    INTEGRATION_READINESS_SCORING_ENABLED = "INTEGRATION_READINESS_SCORING_ENABLED"
    COMPETITIVE_INTELLIGENCE_ENABLED = "COMPETITIVE_INTELLIGENCE_ENABLED"

    @property
    def category(self) -> AIFlagCategory:
        return _CATEGORY_OF[self]


_CATEGORIES: dict[AIFlagCategory, tuple[AIFeatureFlag, ...]] = {
    AIFlagCategory.DOCUMENT_ANALYSIS: (
        AIFeatureFlag.AI_DOCS_ENABLED,
        AIFeatureFlag.AI_STACK_SUGGESTIONS_ENABLED,
        AIFeatureFlag.AI_GAP_ANALYSIS_ENABLED,
        AIFeatureFlag.AI_CROSS_SELL_ENABLED,
    ),
    AIFlagCategory.CONNECTORS: (
        AIFeatureFlag.CONNECTOR_LIBRARY_ENABLED,
        AIFeatureFlag.INDUSTRY_TEMPLATES_ENABLED,
        AIFeatureFlag.AUTO_BACKLOG_ENABLED,
    ),
    AIFlagCategory.OBSERVABILITY: (
        AIFeatureFlag.OBSERVABILITY_ENABLED,
        AIFeatureFlag.AI_INSIGHTS_DASHBOARD_ENABLED,
        AIFeatureFlag.USAGE_ANALYTICS_ENABLED,
    ),
    AIFlagCategory.ONBOARDING: (
        AIFeatureFlag.AI_ONBOARDING_RECOMMENDATIONS_ENABLED,
        AIFeatureFlag.SMART_CONNECTOR_PREFILL_ENABLED,
        AIFeatureFlag.PAIN_POINT_DETECTION_ENABLED,
    ),
    AIFlagCategory.CROSS_SELL: (
        AIFeatureFlag.LIFECYCLE_CROSS_SELL_ENABLED,
        AIFeatureFlag.USAGE_BASED_UPSELL_ENABLED,
        AIFeatureFlag.RETENTION_RISK_DETECTION_ENABLED,
    ),
    AIFlagCategory.BUSINESS_INTELLIGENCE: (
        AIFeatureFlag.BI_DASHBOARD_ENABLED,
        AIFeatureFlag.INDUSTRY_BENCHMARKING_ENABLED,
        AIFeatureFlag.QUARTERLY_HEALTH_REPORTS_ENABLED,
    ),
    AIFlagCategory.ADVANCED: (
        AIFeatureFlag.BUSINESS_MATURITY_ANALYSIS_ENABLED,
        AIFeatureFlag.INTEGRATION_READINESS_SCORING_ENABLED,
        AIFeatureFlag.COMPETITIVE_INTELLIGENCE_ENABLED,
    ),
}

_CATEGORY_OF: dict[AIFeatureFlag, AIFlagCategory] = {
    flag: category for category, flags in _CATEGORIES.items() for flag in flags
}

# All AI capabilities ship dark.
AI_FLAG_DEFAULTS: Mapping[AIFeatureFlag, bool] = MappingProxyType({flag: False for flag in AIFeatureFlag})


class AIFeatureFlags(FlagBundle[AIFeatureFlag]):
    """The AI capability bundle with per-capability shortcuts."""

    def __init__(self, evaluator: FlagEvaluator) -> None:
        super().__init__(AIFeatureFlag, evaluator, AI_FLAG_DEFAULTS)

    @staticmethod
    def flags_in(category: AIFlagCategory) -> tuple[AIFeatureFlag, ...]:
        return _CATEGORIES[category]

    async def is_category_enabled(
        self,
        category: AIFlagCategory,
        context: ResolutionContext | None = None,
        config: FlagConfig | None = None,
    ) -> bool:
        return await self.any_enabled(*_CATEGORIES[category], context=context, config=config)

    async def is_ai_docs_enabled(
        self, context: ResolutionContext | None = None, config: FlagConfig | None = None
    ) -> bool:
        return await self.is_enabled(AIFeatureFlag.AI_DOCS_ENABLED, context, config)

    async def is_gap_analysis_enabled(
        self, context: ResolutionContext | None = None, config: FlagConfig | None = None
    ) -> bool:
        return await self.is_enabled(AIFeatureFlag.AI_GAP_ANALYSIS_ENABLED, context, config)

    async def is_cross_sell_enabled(
        self, context: ResolutionContext | None = None, config: FlagConfig | None = None
    ) -> bool:
        return await self.is_enabled(AIFeatureFlag.AI_CROSS_SELL_ENABLED, context, config)

    async def is_connector_library_enabled(
        self, context: ResolutionContext | None = None, config: FlagConfig | None = None
    ) -> bool:
        return await self.is_enabled(AIFeatureFlag.CONNECTOR_LIBRARY_ENABLED, context, config)

    async def is_observability_enabled(
        self, context: ResolutionContext | None = None, config: FlagConfig | None = None
    ) -> bool:
        return await self.is_enabled(AIFeatureFlag.OBSERVABILITY_ENABLED, context, config)

    async def is_bi_dashboard_enabled(
        self, context: ResolutionContext | None = None, config: FlagConfig | None = None
    ) -> bool:
        return await self.is_enabled(AIFeatureFlag.BI_DASHBOARD_ENABLED, context, config)

    async def is_onboarding_ai_enabled(
        self, context: ResolutionContext | None = None, config: FlagConfig | None = None
    ) -> bool:
        """True when any onboarding assist (recommendations, prefill, pain points) is on."""
        return await self.is_category_enabled(AIFlagCategory.ONBOARDING, context, config)
