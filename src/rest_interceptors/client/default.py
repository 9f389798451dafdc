"""Client – default root client registry."""
from __future__ import annotations

import threading

from rest_interceptors.client.base import ClientCallable

_lock = threading.Lock()
_default: ClientCallable | None = None


def get_default_client() -> ClientCallable:
    """Return the default root client, creating an ``HttpxClient`` on first use."""
    global _default
    with _lock:
        if _default is None:
            from rest_interceptors.adapters.http import HttpxClient

            _default = HttpxClient()
        return _default


def set_default_client(client: ClientCallable | None) -> None:
    """Replace the default root client; ``None`` restores lazy creation."""
    global _default
    with _lock:
        _default = client


__all__ = ["get_default_client", "set_default_client"]
