"""Config – FlagConfig, the resolver's connection and behaviour parameters."""
from __future__ import annotations

import dataclasses
from typing import ClassVar, Mapping

from mp_flags.config.settings.base import Settings
from mp_flags.config.settings.loaders import EnvSettingsLoader
from mp_flags.config.validation import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class FlagConfig(Settings):
    """Static parameters for flag resolution.

    Identifies the remote configuration profile and the tenant override
    table, and controls caching and per-source timeouts. Instances are
    immutable; pass a different instance per call to change behaviour
    (e.g. in tests).
    """

    _prefix: ClassVar[str] = "FLAGS"

    app_config_application: str = "platform"
    app_config_environment: str = "sandbox"
    app_config_profile: str = "feature-flags"
    dynamo_table_name: str = "platform-flags"
    region: str = "us-west-2"
    cache_ttl_seconds: float = 60.0
    remote_timeout_seconds: float = 2.0
    coalesce_requests: bool = False

    def _validate(self) -> None:
        if self.cache_ttl_seconds <= 0:
            raise InvalidSettingValueError(
                "cache_ttl_seconds", self.cache_ttl_seconds, "must be greater than zero"
            )
        if self.remote_timeout_seconds <= 0:
            raise InvalidSettingValueError(
                "remote_timeout_seconds", self.remote_timeout_seconds, "must be greater than zero"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "FlagConfig":
        """Build from ``FLAGS_*`` environment variables, defaults for the rest."""
        return EnvSettingsLoader(environ).load(cls)


__all__ = ["FlagConfig"]
