"""Integration test fixtures (service checks and prerequisites).

Integration tests are skipped if no real API key is available.
"""

import os

import pytest


@pytest.fixture(scope="session")
def gemini_api_key() -> str:
    """Real API key from GEMINI_TEST_API_KEY; skips tests when unset."""
    key = os.environ.get("GEMINI_TEST_API_KEY")
    if not key:
        pytest.skip("GEMINI_TEST_API_KEY not set")
    return key


@pytest.fixture
def real_service(gemini_api_key, test_settings):
    """GatewayService wired against the real endpoint.

    The first credential is deliberately invalid so every call exercises
    one rotation before reaching the real key.
    """
    from gemini_gateway.service import build_service

    test_settings.API_KEYS = ["invalid-key-000000", gemini_api_key]
    return build_service(test_settings)
