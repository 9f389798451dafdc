"""HTTP adapter – httpx-backed root client."""
from rest_interceptors.adapters.http.client import HttpxClient

__all__ = ["HttpxClient"]
