"""Client – request/response types, chaining bases and the default client."""
from rest_interceptors.client.base import Client, ClientCallable, Interceptor, InterceptorFactory
from rest_interceptors.client.default import get_default_client, set_default_client
from rest_interceptors.client.types import Request, Response

__all__ = [
    "Client",
    "ClientCallable",
    "Interceptor",
    "InterceptorFactory",
    "Request",
    "Response",
    "get_default_client",
    "set_default_client",
]
