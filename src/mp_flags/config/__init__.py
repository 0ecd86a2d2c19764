"""Config – 12-factor settings, loaders, and the flag resolver configuration."""

from mp_flags.config.flags import FlagConfig
from mp_flags.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from mp_flags.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FlagConfig",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
