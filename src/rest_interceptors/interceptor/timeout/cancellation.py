"""Timeout interceptor – best-effort cancellation of an abandoned request."""
from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Callable

from rest_interceptors.observability.logging import get_logger

logger = get_logger(__name__)


def cancel_capability(request: Any) -> Callable[[], Any] | None:
    """Return the request's ``cancel`` callable, if it exposes one."""
    if isinstance(request, Mapping):
        cancel = request.get("cancel")
    else:
        cancel = getattr(request, "cancel", None)
    return cancel if callable(cancel) else None


def _mark_canceled(request: Any) -> None:
    if isinstance(request, MutableMapping):
        request["canceled"] = True
        return
    try:
        request.canceled = True
    except (AttributeError, TypeError):
        # immutable request; nothing to flag
        pass


def cancel_request(request: Any) -> bool:
    """Ask the owner of *request* to abort in-flight work.

    Invokes the request's ``cancel`` capability once when present and returns
    ``True``.  Without one the request is only flagged ``canceled`` and
    ``False`` is returned.  A capability that raises is logged, never
    propagated.
    """
    cancel = cancel_capability(request)
    if cancel is None:
        _mark_canceled(request)
        return False
    try:
        cancel()
    except Exception:
        logger.warning("timeout_interceptor.cancel_failed", exc_info=True)
    return True


__all__ = ["cancel_capability", "cancel_request"]
