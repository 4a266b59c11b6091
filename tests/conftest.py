"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit tests.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict

import httpx
import pytest

from gemini_gateway.config import Settings
from gemini_gateway.credentials.pool import CredentialPool
from gemini_gateway.llm.gemini_client import GeminiClient
from gemini_gateway.llm.prompt_builder import PromptBuilder
from gemini_gateway.retry.engine import FailoverEngine
from gemini_gateway.service import GatewayService


TEST_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models/gemini-1.5-flash:generateContent"


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing."""
    return Settings(
        APP_NAME="Gemini Gateway (Test)",
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        API_KEYS=["key-alpha-000001", "key-bravo-000002", "key-charlie-000003"],
        RETRY_BACKOFF_SECONDS=0.0,
        SYSTEM_INSTRUCTION="Você é o Mentor.",
    )


@pytest.fixture
def credentials(test_settings: Settings) -> list[str]:
    return list(test_settings.API_KEYS)


@pytest.fixture
def pool(credentials: list[str]) -> CredentialPool:
    """Fresh three-credential pool starting at index 0."""
    return CredentialPool(credentials)


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_body(fixtures_dir: Path) -> Callable[[str], Dict[str, Any]]:
    """Factory fixture loading a generateContent response body by name.

    Usage:
        def test_something(load_body):
            body = load_body("gemini_success")
    """
    def _load(name: str) -> Dict[str, Any]:
        with open(fixtures_dir / f"{name}.json", encoding="utf-8") as f:
            return json.load(f)

    return _load


@pytest.fixture
def text_body() -> Callable[[str], Dict[str, Any]]:
    """Factory fixture for a successful body carrying `text`."""
    def _create(text: str) -> Dict[str, Any]:
        return {
            "candidates": [
                {
                    "content": {"parts": [{"text": text}], "role": "model"},
                    "finishReason": "STOP",
                }
            ]
        }

    return _create


@pytest.fixture
def no_sleep():
    """Backoff coroutine that records requested delays instead of sleeping."""
    delays: list[float] = []

    async def _sleep(seconds: float) -> None:
        delays.append(seconds)

    _sleep.delays = delays
    return _sleep


@pytest.fixture
def prompt_builder(test_settings: Settings) -> PromptBuilder:
    return PromptBuilder(system_instruction=test_settings.SYSTEM_INSTRUCTION)


class ScriptedTransport:
    """httpx.MockTransport wrapper replaying one scripted reply per request.

    Each script item is an httpx.Response, an exception instance to raise,
    or a dict (sent as a 200 JSON body). Requests are recorded for assertions.
    """

    def __init__(self, script: list):
        self.script = list(script)
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.script:
            raise AssertionError("Unexpected extra request")
        reply = self.script.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, dict):
            return httpx.Response(200, json=reply)
        return reply

    @property
    def keys_used(self) -> list[str]:
        return [r.url.params["key"] for r in self.requests]

    @property
    def payloads(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def scripted_transport() -> Callable[[list], ScriptedTransport]:
    def _create(script: list) -> ScriptedTransport:
        return ScriptedTransport(script)

    return _create


@pytest.fixture
def make_service(pool: CredentialPool, prompt_builder: PromptBuilder, no_sleep):
    """Factory fixture wiring a GatewayService over a scripted transport.

    Usage:
        def test_something(make_service, scripted_transport):
            transport = scripted_transport([httpx.Response(500), {...}])
            service = make_service(transport)
    """
    def _create(transport: ScriptedTransport) -> GatewayService:
        client = GeminiClient(
            endpoint_url=TEST_ENDPOINT,
            timeout=5.0,
            transport=transport.transport,
        )
        engine = FailoverEngine(client=client, pool=pool, backoff_seconds=0.5, sleep=no_sleep)
        return GatewayService(engine=engine, prompt_builder=prompt_builder)

    return _create
