"""Timeout interceptor – bound every request by an effective timeout."""
from rest_interceptors.interceptor.timeout.cancellation import cancel_capability, cancel_request
from rest_interceptors.interceptor.timeout.config import TimeoutConfig, resolve_timeout
from rest_interceptors.interceptor.timeout.interceptor import TimeoutInterceptor, timeout
from rest_interceptors.interceptor.timeout.timer import DeadlineTimer

__all__ = [
    "DeadlineTimer",
    "TimeoutConfig",
    "TimeoutInterceptor",
    "cancel_capability",
    "cancel_request",
    "resolve_timeout",
    "timeout",
]
