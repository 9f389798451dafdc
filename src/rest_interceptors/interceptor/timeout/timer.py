"""Timeout interceptor – DeadlineTimer."""
from __future__ import annotations

import asyncio
from typing import Any, Callable


class DeadlineTimer:
    """A single-shot deadline scheduled on the running event loop.

    The callback runs at most once.  :meth:`cancel` before the deadline
    guarantees it never runs; cancelling a fired or cancelled timer is a
    no-op.  Used as a context manager the timer is armed on entry and
    released on exit.
    """

    def __init__(
        self,
        delay_ms: float,
        callback: Callable[[], None],
    ) -> None:
        self._delay_ms = delay_ms
        self._callback = callback
        self._handle: asyncio.TimerHandle | None = None
        self._fired = False

    @property
    def delay_ms(self) -> float:
        return self._delay_ms

    @property
    def active(self) -> bool:
        return self._handle is not None

    @property
    def fired(self) -> bool:
        return self._fired

    def start(self) -> None:
        if self._handle is not None or self._fired:
            raise RuntimeError("DeadlineTimer can only be started once")
        self._handle = asyncio.get_running_loop().call_later(self._delay_ms / 1000.0, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        if self._fired:
            return
        self._fired = True
        self._callback()

    def __enter__(self) -> "DeadlineTimer":
        self.start()
        return self

    def __exit__(self, *args: Any) -> None:
        self.cancel()


__all__ = ["DeadlineTimer"]
