"""Config validation – errors raised while building settings such as FlagConfig."""
from __future__ import annotations

from mp_flags.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or were rejected."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No variable is set for a settings field that has no default."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A value could not be parsed, or parsed but is out of range (e.g. a zero TTL)."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' rejected value {value!r}: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
