"""Client – Client and Interceptor bases (chaining scaffold)."""
from __future__ import annotations

import abc
from typing import Any, Awaitable, Callable

ClientCallable = Callable[[Any], Awaitable[Any] | Any]
InterceptorFactory = Callable[[ClientCallable, Any], "Client"]


class Client(abc.ABC):
    """An async callable turning a request into a response."""

    @abc.abstractmethod
    async def __call__(self, request: Any) -> Any: ...

    def chain(self, interceptor: InterceptorFactory, config: Any = None) -> "Client":
        """Wrap this client with *interceptor* (fluent API)."""
        return interceptor(self, config)


class Interceptor(Client):
    """A client that decorates a parent client.

    When no parent is given the registered default client is used, so
    ``SomeInterceptor().skip()`` walks back to the root of the chain.
    """

    def __init__(self, client: ClientCallable | None = None, config: Any = None) -> None:
        if client is None:
            from rest_interceptors.client.default import get_default_client

            client = get_default_client()
        self._parent = client
        self._config = config

    @property
    def config(self) -> Any:
        return self._config

    def skip(self) -> ClientCallable:
        """Return the client this interceptor wraps."""
        return self._parent


__all__ = ["Client", "ClientCallable", "Interceptor", "InterceptorFactory"]
