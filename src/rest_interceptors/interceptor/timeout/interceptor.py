"""Timeout interceptor – TimeoutInterceptor and the ``timeout`` factory."""
from __future__ import annotations

import asyncio
import inspect
from typing import Any

from rest_interceptors.client.base import ClientCallable, Interceptor
from rest_interceptors.interceptor.timeout.cancellation import cancel_request
from rest_interceptors.interceptor.timeout.config import resolve_timeout
from rest_interceptors.interceptor.timeout.timer import DeadlineTimer
from rest_interceptors.kernel.errors import timeout_failure
from rest_interceptors.observability.logging import get_logger

logger = get_logger(__name__)


def _start(client: ClientCallable, request: Any) -> asyncio.Future[Any]:
    """Invoke *client* and expose its outcome as a future."""
    loop = asyncio.get_running_loop()
    try:
        result = client(request)
    except Exception as exc:
        failed: asyncio.Future[Any] = loop.create_future()
        failed.set_exception(exc)
        return failed
    if inspect.isawaitable(result):
        return asyncio.ensure_future(result)
    done: asyncio.Future[Any] = loop.create_future()
    done.set_result(result)
    return done


class TimeoutInterceptor(Interceptor):
    """Reject a request that does not settle within its effective timeout.

    The effective timeout comes from ``request.timeout`` when the request
    carries one, otherwise from ``config.timeout`` (milliseconds).  When it is
    disabled the parent's outcome is returned whenever it arrives.

    Otherwise the parent call races a :class:`DeadlineTimer`:

    * the call settles first – the timer is cancelled and the call's result
      (or exception) is delivered unchanged;
    * the timer fires first – the request's ``cancel`` capability is invoked
      and :class:`~rest_interceptors.kernel.errors.TimeoutFailure` is raised.
      Whatever the call produces later is discarded.

    Usage::

        client = timeout(config={"timeout": 5000})
        response = await client(Request(path="/orders"))
    """

    async def __call__(self, request: Any) -> Any:
        timeout_ms = resolve_timeout(request, self._config)
        call = _start(self._parent, request)
        if timeout_ms is None:
            return await call

        settled: asyncio.Future[Any] = asyncio.get_running_loop().create_future()

        def on_deadline() -> None:
            # a finished call whose callback is still queued wins the tie
            if settled.done() or call.done():
                return
            canceled = cancel_request(request)
            logger.debug(
                "timeout_interceptor.deadline_exceeded",
                timeout_ms=timeout_ms,
                cancel_invoked=canceled,
            )
            settled.set_exception(timeout_failure(request, timeout_ms))

        def on_settled(fut: asyncio.Future[Any]) -> None:
            if settled.done():
                # late result after the deadline: observe and drop
                if not fut.cancelled():
                    fut.exception()
                return
            timer.cancel()
            if fut.cancelled():
                settled.cancel()
            elif fut.exception() is not None:
                settled.set_exception(fut.exception())  # type: ignore[arg-type]
            else:
                settled.set_result(fut.result())

        timer = DeadlineTimer(timeout_ms, on_deadline)
        with timer:
            call.add_done_callback(on_settled)
            try:
                return await settled
            except asyncio.CancelledError:
                call.cancel()
                raise


def timeout(client: ClientCallable | None = None, config: Any = None) -> TimeoutInterceptor:
    """Decorate *client* (default: the registered default client) with a timeout."""
    return TimeoutInterceptor(client, config)


__all__ = ["TimeoutInterceptor", "timeout"]
