"""Kernel – error hierarchy shared by every interceptor and client."""
