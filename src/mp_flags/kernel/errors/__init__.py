"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (mp_flags.config.validation)
    └── InfrastructureError  (infrastructure.py)
        ├── TransportError
        ├── TimeoutError
        └── SerializationError
"""

from mp_flags.kernel.errors.application import ApplicationError
from mp_flags.kernel.errors.base import BaseError
from mp_flags.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
    TransportError,
)
from mp_flags.kernel.errors.infrastructure import TimeoutError as InfrastructureTimeoutError

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "InfrastructureTimeoutError",
    "SerializationError",
    "TransportError",
]
