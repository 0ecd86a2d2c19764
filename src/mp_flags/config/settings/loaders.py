"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Mapping, TypeVar

from dotenv import load_dotenv

from mp_flags.config.settings.base import Settings
from mp_flags.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"expected one of {sorted(_TRUE | _FALSE - {''})}")


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from environment variables.

    The variable for a field is ``{PREFIX}_{FIELD}`` upper-cased, e.g.
    ``FLAGS_CACHE_TTL_SECONDS`` for ``FlagConfig.cache_ttl_seconds``.
    Pass *environ* to read from a mapping other than ``os.environ``.
    Values that cannot be parsed into the field's type raise
    :class:`InvalidSettingValueError` naming the variable.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)
            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue
            try:
                kwargs[field.name] = self._coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        try:
            return settings_class(**kwargs)
        except InvalidSettingValueError as exc:
            if exc.setting_name not in kwargs:
                raise
            # rejected by _validate: report the variable the value came from
            env_key = f"{prefix}_{exc.setting_name}".upper().lstrip("_")
            raise InvalidSettingValueError(env_key, environ[env_key], exc.reason) from exc
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to build {settings_class.__name__}: {exc}", cause=exc) from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:
        # annotations are strings under ``from __future__ import annotations``
        name = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", "")
        origin = getattr(type_hint, "__origin__", None)
        if name == "bool":
            return _parse_bool(value)
        if name == "int":
            return int(value)
        if name == "float":
            return float(value)
        if origin is list or (isinstance(type_hint, str) and type_hint.startswith("list[")):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into the process environment, then read it like ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
