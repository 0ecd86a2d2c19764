"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class Settings:
    """Frozen base for settings read from ``{_prefix}_{FIELD}`` variables.

    Subclasses must be frozen dataclasses too. Range checks go in
    :meth:`_validate`, which runs on every construction, so a settings
    object built by hand and one built by a loader are checked alike.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Raise :class:`~mp_flags.config.validation.InvalidSettingValueError` on bad values."""

    def replace(self, **changes: object) -> "Settings":
        """Copy with *changes* applied; the copy is validated again."""
        return dataclasses.replace(self, **changes)


__all__ = ["Settings"]
