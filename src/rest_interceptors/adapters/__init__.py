"""Adapters – concrete transports for the client abstractions."""
