"""Shared fixtures for the rest-interceptors test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from rest_interceptors.client import set_default_client


@pytest.fixture(autouse=True)
def _reset_default_client() -> Iterator[None]:
    """Each test starts with a lazily created default client."""
    set_default_client(None)
    yield
    set_default_client(None)
