"""Pytest configuration and shared fixtures for payments-client-core tests."""

import pytest

from payments_client_core.testing import make_client_config


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Clear payments-related environment variables before each test.

    Keeps a developer's real PAYMENTS_* settings from leaking into config and
    credential resolution tests.
    """
    import os

    test_prefixes = ("PAYMENTS_", "TEST_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def config():
    """Client config matching the documented reference defaults."""
    return make_client_config(
        api_key="sk_live_A",
        client_id="ca_1",
        connect_timeout_ms=30000,
        read_timeout_ms=80000,
        max_network_retries=2,
    )
