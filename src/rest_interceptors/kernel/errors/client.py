"""Client errors — failures synthesized around a client call.

Every error here carries the originating ``request`` and a short ``error``
discriminator so callers can tell a synthesized failure apart from anything
the wrapped client raised on its own.
"""

from __future__ import annotations

from typing import Any

from rest_interceptors.kernel.errors.base import BaseError


class ClientError(BaseError):
    """A failure produced by the client machinery rather than the remote end."""

    default_code = "client_error"
    default_error = "client"

    def __init__(
        self,
        request: Any,
        message: str | None = None,
        *,
        error: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.error = error or self.default_error
        super().__init__(message or f"Client request failed: {self.error}", **kwargs)
        self.request = request

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["error"] = self.error
        base["request"] = repr(self.request)
        return base


class TimeoutFailure(ClientError):
    """The request did not settle within its effective timeout."""

    default_code = "timeout"
    default_error = "timeout"

    def __init__(self, request: Any, *, timeout_ms: float | None = None, **kwargs: Any) -> None:
        message = "Request timed out"
        if timeout_ms is not None:
            message = f"Request timed out after {timeout_ms:g}ms"
        detail = dict(kwargs.pop("detail", None) or {})
        if timeout_ms is not None:
            detail.setdefault("timeout_ms", timeout_ms)
        super().__init__(request, message, detail=detail, **kwargs)
        self.timeout_ms = timeout_ms


class TransportError(ClientError):
    """The underlying transport failed before a response was received."""

    default_code = "transport_error"
    default_error = "transport"


def timeout_failure(request: Any, timeout_ms: float | None = None) -> TimeoutFailure:
    """Build the failure delivered when *request* exceeds its deadline."""
    return TimeoutFailure(request, timeout_ms=timeout_ms)


__all__ = ["ClientError", "TimeoutFailure", "TransportError", "timeout_failure"]
