"""Config settings – frozen settings dataclasses filled from ``{PREFIX}_*`` variables."""
from mp_flags.config.settings.base import Settings
from mp_flags.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
