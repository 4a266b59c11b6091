"""Unit test fixtures (mocks and stubs).

Provides mock objects for testing without network access.
"""

from unittest.mock import AsyncMock

import pytest

from gemini_gateway.llm.base_client import BaseLLMClient
from gemini_gateway.models.llm_models import (
    Classified,
    FilteredEmpty,
    Malformed,
    SafetyBlocked,
    Success,
    TransportFailure,
)


@pytest.fixture
def transport_failure():
    """Factory for TransportFailure results (default: HTTP 500)."""
    def _create(status_code: int | None = 500, error_type: str = "LLMHTTPStatusError"):
        reason = f"HTTP Error: {status_code}" if status_code else "Network error"
        return TransportFailure(reason=reason, error_type=error_type, status_code=status_code)

    return _create


@pytest.fixture
def success_result():
    def _create(text: str = "OK"):
        return Classified(response=Success(text=text))

    return _create


@pytest.fixture
def blocked_result():
    return Classified(response=SafetyBlocked(block_reason="SAFETY"))


@pytest.fixture
def filtered_result():
    return Classified(response=FilteredEmpty(finish_reason="SAFETY"))


@pytest.fixture
def malformed_result():
    return Classified(response=Malformed())


@pytest.fixture
def mock_client():
    """Factory for a mock BaseLLMClient replaying attempt results in order."""
    def _create(*results):
        mock = AsyncMock(spec=BaseLLMClient)
        mock.submit = AsyncMock(side_effect=list(results))
        return mock

    return _create
