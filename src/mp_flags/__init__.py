"""
mp_flags – multi-tenant feature flag and remote configuration resolution.

Import path convention::

    from mp_flags.flags import FlagResolver, ResolutionContext
    from mp_flags.config import FlagConfig
    from mp_flags.aggregation import AIFeatureFlags, ReadinessLevel
    from mp_flags.adapters.aws import AppConfigRemoteSource
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
