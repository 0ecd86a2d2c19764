"""Flags sources – EnvironSource."""
from __future__ import annotations

import os
from typing import Mapping


class EnvironSource:
    """Environment-variable defaults (``os.environ`` unless a mapping is given).

    Empty values count as unset.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def get(self, key: str) -> str | None:
        environ = os.environ if self._environ is None else self._environ
        return environ.get(key) or None


__all__ = ["EnvironSource"]
