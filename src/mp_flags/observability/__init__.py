"""Observability – structured logging and health checks."""
from mp_flags.observability.health import FlagSourcesHealthCheck, HealthCheck, HealthStatus
from mp_flags.observability.logging import JsonLoggerFactory, get_logger

__all__ = [
    "FlagSourcesHealthCheck",
    "HealthCheck",
    "HealthStatus",
    "JsonLoggerFactory",
    "get_logger",
]
