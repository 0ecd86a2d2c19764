"""Kernel errors – BaseError, root of every error mp-flags raises or logs."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Carries a slug (``code``) and structured ``detail`` alongside the message.

    Source failures never reach resolver callers; they end up in
    ``flag_source_failed`` warnings through :meth:`log_fields`. ``cause``
    is the exception from the backend or library underneath and is also
    chained as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            data["cause"] = repr(self.cause)
        return data

    def log_fields(self) -> dict[str, Any]:
        """Flat key/values for a structlog call.

        ``error`` is the underlying exception when there is one, since the
        wrapper's message rarely says more than which tier failed.
        """
        fields: dict[str, Any] = {
            "error_code": self.code,
            "error": repr(self.cause) if self.cause is not None else self.message,
        }
        fields.update(self.detail)
        return fields

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
