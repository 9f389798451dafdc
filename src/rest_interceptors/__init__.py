"""
rest_interceptors – composable interceptors for async REST clients.

Import path convention::

    from rest_interceptors.interceptor import timeout
    from rest_interceptors.client import Request, get_default_client
    from rest_interceptors.kernel.errors import TimeoutFailure
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
