"""Observability – structured logging helpers."""
from rest_interceptors.observability.logging.factory import JsonLoggerFactory
from rest_interceptors.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
