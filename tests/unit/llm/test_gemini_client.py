"""
Unit tests for GeminiClient.

HTTP is faked with httpx.MockTransport; no network access.
"""

import json

import httpx
import pytest

from gemini_gateway.llm.gemini_client import GeminiClient
from gemini_gateway.models.llm_models import (
    Classified,
    FilteredEmpty,
    Malformed,
    SafetyBlocked,
    Success,
    TransportFailure,
)


TEST_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models/gemini-1.5-flash:generateContent"


def make_client(transport) -> GeminiClient:
    return GeminiClient(endpoint_url=TEST_ENDPOINT, timeout=5.0, transport=transport.transport)


@pytest.fixture
def chat_request(prompt_builder):
    return prompt_builder.build_chat_request("Olá, Mentor")


@pytest.mark.asyncio
async def test_request_shape(scripted_transport, text_body, chat_request):
    """POST to the model endpoint, key as query parameter, JSON body."""
    transport = scripted_transport([text_body("oi")])
    client = make_client(transport)

    await client.submit(chat_request, "key-alpha-000001")

    sent = transport.requests[0]
    assert sent.method == "POST"
    assert sent.url.path == "/v1beta/models/gemini-1.5-flash:generateContent"
    assert sent.url.params["key"] == "key-alpha-000001"
    assert sent.headers["content-type"] == "application/json"
    assert json.loads(sent.content) == chat_request.to_payload()
    await client.close()


@pytest.mark.asyncio
async def test_success_is_classified(scripted_transport, load_body, chat_request):
    client = make_client(scripted_transport([load_body("gemini_success")]))

    result = await client.submit(chat_request, "key-alpha-000001")

    assert isinstance(result, Classified)
    assert isinstance(result.response, Success)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "fixture_name, expected",
    [
        ("gemini_blocked", SafetyBlocked),
        ("gemini_filtered", FilteredEmpty),
        ("gemini_empty_stop", Malformed),
    ],
)
async def test_non_text_bodies_are_classified(
    scripted_transport, load_body, chat_request, fixture_name, expected
):
    client = make_client(scripted_transport([load_body(fixture_name)]))

    result = await client.submit(chat_request, "key-alpha-000001")

    assert isinstance(result, Classified)
    assert isinstance(result.response, expected)


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 401, 403, 429, 500, 503])
async def test_any_non_2xx_is_transport_failure(scripted_transport, chat_request, status_code):
    """Status code is recorded but never used to decide retry-worthiness."""
    response = httpx.Response(status_code, json={"error": {"code": status_code, "message": "nope"}})
    client = make_client(scripted_transport([response]))

    result = await client.submit(chat_request, "key-alpha-000001")

    assert isinstance(result, TransportFailure)
    assert result.status_code == status_code
    assert result.error_type == "LLMHTTPStatusError"
    assert result.reason == f"HTTP Error: {status_code}"


@pytest.mark.asyncio
async def test_network_error_is_transport_failure(scripted_transport, chat_request):
    error = httpx.ConnectError("connection refused")
    client = make_client(scripted_transport([error]))

    result = await client.submit(chat_request, "key-alpha-000001")

    assert isinstance(result, TransportFailure)
    assert result.error_type == "LLMConnectionError"
    assert result.status_code is None
    assert "key-alpha" not in result.reason


@pytest.mark.asyncio
async def test_timeout_is_transport_failure(scripted_transport, chat_request):
    client = make_client(scripted_transport([httpx.ReadTimeout("too slow")]))

    result = await client.submit(chat_request, "key-alpha-000001")

    assert isinstance(result, TransportFailure)
    assert result.error_type == "LLMTimeoutError"


@pytest.mark.asyncio
async def test_undecodable_body_is_transport_failure(scripted_transport, chat_request):
    response = httpx.Response(200, content=b"<html>gateway</html>")
    client = make_client(scripted_transport([response]))

    result = await client.submit(chat_request, "key-alpha-000001")

    assert isinstance(result, TransportFailure)
    assert result.error_type == "LLMInvalidResponseError"


@pytest.mark.asyncio
async def test_too_deeply_nested_body_is_transport_failure(scripted_transport, chat_request):
    """Decoding raises RecursionError, not ValueError; still a failed attempt."""
    depth = 200_000
    response = httpx.Response(200, content=b"[" * depth + b"]" * depth)
    client = make_client(scripted_transport([response]))

    result = await client.submit(chat_request, "key-alpha-000001")

    assert isinstance(result, TransportFailure)
    assert result.error_type == "LLMInvalidResponseError"
    assert result.details == {"parse_error": "RecursionError"}


@pytest.mark.asyncio
async def test_non_object_json_is_transport_failure(scripted_transport, chat_request):
    response = httpx.Response(200, json=["not", "an", "object"])
    client = make_client(scripted_transport([response]))

    result = await client.submit(chat_request, "key-alpha-000001")

    assert isinstance(result, TransportFailure)
    assert result.details == {"body_type": "list"}


@pytest.mark.asyncio
async def test_client_is_reused_and_recreated_after_close(scripted_transport, text_body, chat_request):
    transport = scripted_transport([text_body("a"), text_body("b"), text_body("c")])
    client = make_client(transport)

    await client.submit(chat_request, "k1-000001")
    first = client._client
    await client.submit(chat_request, "k1-000001")
    assert client._client is first

    await client.close()
    assert first.is_closed

    result = await client.submit(chat_request, "k1-000001")
    assert client._client is not first
    assert result.response.text == "c"
    await client.close()


@pytest.mark.asyncio
async def test_close_without_requests_is_noop():
    client = GeminiClient(endpoint_url=TEST_ENDPOINT)

    await client.close()

    assert client._client is None
