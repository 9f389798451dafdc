"""Client – Request and Response value types."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable


@dataclasses.dataclass(eq=False)
class Request:
    """An outbound request.

    ``timeout`` is in milliseconds and overrides any interceptor-level value,
    including ``0`` to switch enforcement off.  ``None`` means "not supplied".

    Clients that support aborting in-flight work install ``cancel`` while the
    request is running; ``canceled`` is set once the request is abandoned.
    """

    method: str = "GET"
    path: str = ""
    params: dict[str, Any] | None = None
    headers: dict[str, str] = dataclasses.field(default_factory=dict)
    entity: Any = None
    timeout: float | None = None
    cancel: Callable[[], None] | None = dataclasses.field(default=None, repr=False)
    canceled: bool = False


@dataclasses.dataclass
class Response:
    """The result of a completed round-trip, whatever its status code."""

    request: Any
    status: int
    headers: dict[str, str] = dataclasses.field(default_factory=dict)
    entity: Any = None
    raw: Any = dataclasses.field(default=None, repr=False, compare=False)


__all__ = ["Request", "Response"]
