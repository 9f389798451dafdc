"""Observability – structured logging."""
from rest_interceptors.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
