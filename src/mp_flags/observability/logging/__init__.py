"""Observability – structured logging helpers."""
from mp_flags.observability.logging.factory import JsonLoggerFactory
from mp_flags.observability.logging.processors import ResolutionContextProcessor, get_logger

__all__ = ["JsonLoggerFactory", "ResolutionContextProcessor", "get_logger"]
