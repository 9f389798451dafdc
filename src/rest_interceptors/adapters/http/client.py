"""HTTP adapter – HttpxClient."""
from __future__ import annotations

import asyncio
from typing import Any

import httpx

from rest_interceptors.client.base import Client
from rest_interceptors.client.types import Request, Response
from rest_interceptors.kernel.errors import TransportError
from rest_interceptors.observability.logging import get_logger

logger = get_logger(__name__)


class HttpxClient(Client):
    """Root client sending :class:`Request` objects over an ``httpx.AsyncClient``.

    Every HTTP status resolves to a :class:`Response`; only transport-level
    failures raise.  While a request is in flight it carries a ``cancel``
    capability that abandons the round-trip.
    """

    def __init__(self, base_url: str = "", **kwargs: Any) -> None:
        self._base_url = base_url
        self._kwargs = kwargs
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "HttpxClient":
        await self._http().__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(base_url=self._base_url, **self._kwargs)
        return self._client

    async def __call__(self, request: Any) -> Response:
        if isinstance(request, str):
            request = Request(path=request)
        if request.canceled:
            raise TransportError(request, "Request canceled before sending", error="canceled")

        send = asyncio.ensure_future(self._send(request))

        def cancel() -> None:
            request.canceled = True
            send.cancel()

        request.cancel = cancel
        try:
            return await send
        except asyncio.CancelledError:
            if send.cancelled() and request.canceled:
                raise TransportError(request, "Request canceled", error="canceled") from None
            raise

    async def _send(self, request: Request) -> Response:
        kwargs: dict[str, Any] = {"params": request.params, "headers": request.headers}
        if isinstance(request.entity, (str, bytes)):
            kwargs["content"] = request.entity
        elif request.entity is not None:
            kwargs["json"] = request.entity

        try:
            raw = await self._http().request(request.method, request.path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning(
                "http_client.request_failed",
                method=request.method,
                path=request.path,
                error=str(exc),
            )
            raise TransportError(request, str(exc) or type(exc).__name__, cause=exc) from exc

        return Response(
            request=request,
            status=raw.status_code,
            headers=dict(raw.headers),
            entity=_decode(raw),
            raw=raw,
        )


def _decode(raw: httpx.Response) -> Any:
    content_type = raw.headers.get("content-type", "")
    if "json" in content_type and raw.content:
        try:
            return raw.json()
        except ValueError:
            return raw.text
    return raw.text if raw.content else None


__all__ = ["HttpxClient"]
