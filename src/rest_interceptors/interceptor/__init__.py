"""Interceptors – decorators adding cross-cutting behaviour to a client."""
from rest_interceptors.interceptor.timeout import TimeoutConfig, TimeoutInterceptor, timeout

__all__ = ["TimeoutConfig", "TimeoutInterceptor", "timeout"]
