"""
tests/conftest.py

Shared pytest fixtures for the unit test suite.
All HTTP fixtures use respx.mock, so no request reaches a real lookup service.
"""

from __future__ import annotations

import pytest
import respx
import httpx


# ---------------------------------------------------------------------------
# HTTP mock fixture — intercepts all httpx calls
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_http():
    """
    Yields a respx router that intercepts all httpx.Client calls.

    No real network traffic is allowed while it is active. Use this fixture
    wherever IpService would normally make an outbound request.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ---------------------------------------------------------------------------
# Shared httpx.Client fixture
# ---------------------------------------------------------------------------


@pytest.fixture()
def http_client():
    """
    Yields a real httpx.Client instance for use in tests.

    Pair with the mock_http fixture so all requests are intercepted by respx.
    The client is closed after each test.
    """
    with httpx.Client() as client:
        yield client
