"""Unit tests – HTTP adapter (HttpxClient)."""
from __future__ import annotations

import asyncio
import json
from typing import Any

import httpx
import pytest
import respx

from rest_interceptors.adapters.http import HttpxClient
from rest_interceptors.client import Request, Response
from rest_interceptors.interceptor import timeout
from rest_interceptors.kernel.errors import TimeoutFailure, TransportError


def _slow_transport(delay: float = 1.0) -> httpx.MockTransport:
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(delay)
        return httpx.Response(200)

    return httpx.MockTransport(handler)


# ---------------------------------------------------------------------------
# Round-trips
# ---------------------------------------------------------------------------


class TestHttpxClientRoundTrip:
    @respx.mock
    def test_returns_response_with_decoded_json(self) -> None:
        respx.get("http://svc/items").mock(return_value=httpx.Response(200, json={"id": 1}))

        async def run() -> Response:
            async with HttpxClient() as client:
                return await client(Request(path="http://svc/items"))

        response = asyncio.run(run())
        assert response.status == 200
        assert response.entity == {"id": 1}
        assert response.request.path == "http://svc/items"

    @respx.mock
    def test_error_status_still_resolves(self) -> None:
        respx.get("http://svc/gone").mock(return_value=httpx.Response(404, text="missing"))

        async def run() -> Response:
            async with HttpxClient() as client:
                return await client(Request(path="http://svc/gone"))

        response = asyncio.run(run())
        assert response.status == 404
        assert response.entity == "missing"

    @respx.mock
    def test_string_request_is_wrapped(self) -> None:
        respx.get("http://svc/ok").mock(return_value=httpx.Response(204))

        async def run() -> Response:
            async with HttpxClient() as client:
                return await client("http://svc/ok")

        response = asyncio.run(run())
        assert isinstance(response.request, Request)
        assert response.entity is None

    @respx.mock
    def test_entity_sent_as_json_with_params_and_headers(self) -> None:
        route = respx.post("http://svc/orders").mock(return_value=httpx.Response(201))
        request = Request(
            method="POST",
            path="http://svc/orders",
            params={"dry_run": "1"},
            headers={"X-Trace": "t-1"},
            entity={"sku": "A1"},
        )

        async def run() -> None:
            async with HttpxClient() as client:
                await client(request)

        asyncio.run(run())
        sent = route.calls.last.request
        assert json.loads(sent.content) == {"sku": "A1"}
        assert sent.url.params["dry_run"] == "1"
        assert sent.headers["x-trace"] == "t-1"

    def test_base_url_is_applied(self) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200)

        async def run() -> None:
            async with HttpxClient("http://api.local", transport=httpx.MockTransport(handler)) as client:
                await client(Request(path="/v1/ping"))

        asyncio.run(run())
        assert seen == ["http://api.local/v1/ping"]


# ---------------------------------------------------------------------------
# Failures and cancellation
# ---------------------------------------------------------------------------


class TestHttpxClientFailures:
    @respx.mock
    def test_transport_failure_raises_transport_error(self) -> None:
        respx.get("http://svc/down").mock(side_effect=httpx.ConnectError("refused"))
        request = Request(path="http://svc/down")

        async def run() -> None:
            async with HttpxClient() as client:
                await client(request)

        with pytest.raises(TransportError) as exc_info:
            asyncio.run(run())
        assert exc_info.value.request is request
        assert exc_info.value.error == "transport"
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_installs_cancel_capability(self) -> None:
        request = Request(path="http://svc/slow")

        async def run() -> None:
            async with HttpxClient(transport=_slow_transport()) as client:
                pending = asyncio.ensure_future(client(request))
                await asyncio.sleep(0.01)
                assert callable(request.cancel)
                request.cancel()  # type: ignore[misc]
                await pending

        with pytest.raises(TransportError) as exc_info:
            asyncio.run(run())
        assert exc_info.value.error == "canceled"
        assert request.canceled is True

    def test_already_canceled_request_is_not_sent(self) -> None:
        calls: list[Any] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200)

        async def run() -> None:
            async with HttpxClient(transport=httpx.MockTransport(handler)) as client:
                await client(Request(path="http://svc/x", canceled=True))

        with pytest.raises(TransportError):
            asyncio.run(run())
        assert calls == []


# ---------------------------------------------------------------------------
# Behind the timeout interceptor
# ---------------------------------------------------------------------------


class TestHttpxClientWithTimeout:
    def test_timeout_cancels_in_flight_request(self) -> None:
        request = Request(path="http://svc/slow")

        async def run() -> None:
            async with HttpxClient(transport=_slow_transport()) as http:
                client = timeout(http, {"timeout": 10})
                with pytest.raises(TimeoutFailure) as exc_info:
                    await client(request)
                assert exc_info.value.request is request
                # the abandoned round-trip settles as a discarded TransportError
                await asyncio.sleep(0.01)

        asyncio.run(run())
        assert request.canceled is True

    @respx.mock
    def test_fast_response_passes_through(self) -> None:
        respx.get("http://svc/fast").mock(return_value=httpx.Response(200, json=[1, 2]))
        request = Request(path="http://svc/fast")

        async def run() -> Response:
            async with HttpxClient() as http:
                return await timeout(http, {"timeout": 1000})(request)

        response = asyncio.run(run())
        assert response.entity == [1, 2]
        assert request.canceled is False
