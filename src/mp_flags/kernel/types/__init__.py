"""Kernel types."""
from mp_flags.kernel.types.lookup import Errored, Found, Lookup, NotFound

__all__ = ["Errored", "Found", "Lookup", "NotFound"]
