"""Resilience – deadlines for remote source lookups."""
from mp_flags.resilience.timeouts.policy import TimeoutPolicy

__all__ = ["TimeoutPolicy"]
