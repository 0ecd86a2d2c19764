"""Kernel – framework-agnostic building blocks."""

from mp_flags.kernel.errors import (
    ApplicationError,
    BaseError,
    InfrastructureError,
    SerializationError,
    TransportError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "SerializationError",
    "TransportError",
]
