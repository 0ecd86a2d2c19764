"""Infrastructure errors – failures of the backends a flag is read from."""

from __future__ import annotations

from typing import Any

from mp_flags.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class TransportError(InfrastructureError):
    """A source tier could not answer a lookup (network, auth, bad response)."""

    default_code = "transport_error"

    def __init__(
        self,
        tier: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Lookup against '{tier}' failed", **kwargs)
        self.tier = tier


class TimeoutError(InfrastructureError):  # noqa: A001
    """An I/O operation exceeded its deadline."""

    default_code = "infrastructure_timeout"


class SerializationError(InfrastructureError):
    """A remote configuration document could not be decoded."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = [
    "InfrastructureError",
    "SerializationError",
    "TimeoutError",
    "TransportError",
]
