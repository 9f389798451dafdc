"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ClientError          (client.py)
    │   ├── TimeoutFailure
    │   └── TransportError
    └── ConfigError          (rest_interceptors.config.validation)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from rest_interceptors.kernel.errors.base import BaseError
from rest_interceptors.kernel.errors.client import (
    ClientError,
    TimeoutFailure,
    TransportError,
    timeout_failure,
)

__all__ = [
    "BaseError",
    "ClientError",
    "TimeoutFailure",
    "TransportError",
    "timeout_failure",
]
