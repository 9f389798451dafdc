"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from dotenv import load_dotenv

from rest_interceptors.config.settings.base import Settings
from rest_interceptors.config.validation import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


def _is_optional(type_hint: Any) -> bool:
    if isinstance(type_hint, str):
        return "None" in type_hint or type_hint.startswith("Optional[")
    return type(None) in getattr(type_hint, "__args__", ())


def _base_type(type_hint: Any) -> Any:
    """Strip ``| None`` / ``Optional[...]`` from *type_hint*."""
    if isinstance(type_hint, str):
        hint = type_hint.replace(" ", "")
        if hint.startswith("Optional[") and hint.endswith("]"):
            return hint[len("Optional["):-1]
        parts = [p for p in hint.split("|") if p != "None"]
        return parts[0] if len(parts) == 1 else hint
    args = [a for a in getattr(type_hint, "__args__", ()) if a is not type(None)]
    if len(args) == 1 and _is_optional(type_hint):
        return args[0]
    return type_hint


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables."""

    def load(self, settings_class: type[T]) -> T:
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = os.environ.get(env_key)

            if raw is None or (raw.strip() == "" and _is_optional(field.type)):
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            try:
                kwargs[field.name] = self._coerce(raw, _base_type(field.type))
            except ValueError as exc:
                raise ConfigError(f"Cannot parse {env_key}={raw!r}: {exc}") from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}") from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:  # noqa: PLR0911
        origin = getattr(type_hint, "__origin__", None)
        if type_hint is bool or type_hint == "bool":
            return value.lower() in ("1", "true", "yes", "on")
        if type_hint is int or type_hint == "int":
            return int(value)
        if type_hint is float or type_hint == "float":
            return float(value)
        if origin is list or (isinstance(type_hint, str) and type_hint.startswith("list")):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


class DotenvSettingsLoader(SettingsLoader):
    """Load settings from a ``.env`` file then fall back to ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
