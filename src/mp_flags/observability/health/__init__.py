"""Observability – health checks."""
from mp_flags.observability.health.check import HealthCheck, HealthStatus
from mp_flags.observability.health.flag_sources import FlagSourcesHealthCheck

__all__ = ["FlagSourcesHealthCheck", "HealthCheck", "HealthStatus"]
