"""Timeout interceptor – configuration and effective-timeout resolution."""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from typing import Any, ClassVar

from rest_interceptors.config.settings import EnvSettingsLoader, Settings
from rest_interceptors.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class TimeoutConfig(Settings):
    """Interceptor-level timeout, in milliseconds.

    ``None`` or ``0`` leaves enforcement off.  Loaded from ``REST_TIMEOUT``
    by :meth:`from_env`.
    """

    _prefix: ClassVar[str] = "REST"

    timeout: float | None = None

    def _validate(self) -> None:
        if self.timeout is None:
            return
        if not math.isfinite(self.timeout):
            raise InvalidSettingValueError("timeout", self.timeout, "must be a finite number")
        if self.timeout < 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must not be negative")

    @classmethod
    def from_env(cls) -> "TimeoutConfig":
        return EnvSettingsLoader().load(cls)


def _lookup(source: Any, key: str) -> Any:
    if source is None:
        return None
    if isinstance(source, Mapping):
        return source.get(key)
    return getattr(source, key, None)


def resolve_timeout(request: Any, config: Any = None) -> float | None:
    """Return the timeout to enforce for *request*, or ``None`` when disabled.

    A ``timeout`` carried by the request wins over the one in *config*, even
    when it is ``0``.  Zero, negative and missing values all disable
    enforcement, as does a value that is not a finite number.
    """
    timeout = _lookup(request, "timeout")
    if timeout is None:
        timeout = _lookup(config, "timeout")
    if not timeout or not math.isfinite(timeout) or timeout < 0:
        return None
    return float(timeout)


__all__ = ["TimeoutConfig", "resolve_timeout"]
