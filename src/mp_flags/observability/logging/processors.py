"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class ResolutionContextProcessor:
    """structlog processor that flattens a bound ``context`` into log fields.

    Resolver log calls pass the :class:`ResolutionContext` as ``context=``;
    this replaces it with ``tenant_id`` / ``client_id`` keys (only when not
    ``None``) so JSON output stays flat and serialisable.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        ctx = event_dict.pop("context", None)
        if ctx is not None:
            tenant_id = getattr(ctx, "tenant_id", None)
            client_id = getattr(ctx, "client_id", None)
            if tenant_id is not None:
                event_dict.setdefault("tenant_id", tenant_id)
            if client_id is not None:
                event_dict.setdefault("client_id", client_id)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["ResolutionContextProcessor", "get_logger"]
