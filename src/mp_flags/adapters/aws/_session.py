"""AWS adapters – shared aiobotocore session helper."""
from __future__ import annotations

from typing import Any


def _require_aiobotocore() -> Any:  # pragma: no cover
    try:
        import aiobotocore.session  # noqa: PLC0415
        return aiobotocore.session
    except ImportError as exc:
        raise ImportError(
            "aiobotocore is required for the AWS flag sources. "
            "Install it with: pip install 'mp-flags[aws]'"
        ) from exc


def get_session() -> Any:
    return _require_aiobotocore().get_session()


__all__ = ["get_session"]
