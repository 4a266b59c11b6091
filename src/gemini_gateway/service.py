"""
Public operations consumed by the chat UI.

- send_message(text, attachment=None) -> str
    Never raises. On exhaustion returns the overload message.
- generate_outline(topic) -> str | None
    Never raises. On exhaustion returns None.

Both go through the same process-wide credential pool, so a rotation made
by one call decides the starting credential of the next call.

Settings are validated when get_service() first runs; call it at startup
so a missing API_KEYS fails there rather than inside an operation.
"""

from functools import lru_cache
from typing import Optional

import structlog

from gemini_gateway.config import Settings, get_settings
from gemini_gateway.credentials.pool import CredentialPool
from gemini_gateway.llm.gemini_client import GeminiClient
from gemini_gateway.llm.prompt_builder import PromptBuilder
from gemini_gateway.logging_config import configure_logging
from gemini_gateway.messages import DEFAULT_MESSAGES, FailureMessages
from gemini_gateway.models.enums import OutcomeKind
from gemini_gateway.models.llm_models import GenerationRequest, InlineAttachment
from gemini_gateway.monitoring.metrics import call_outcomes_total
from gemini_gateway.retry.engine import FailoverEngine
from gemini_gateway.retry.exceptions import RetryExhausted
from gemini_gateway.retry.metadata import CallOutcome


logger = structlog.get_logger(__name__)


class GatewayService:
    """
    Total (never-failing) facade over the failover engine.

    Attributes:
        engine: Failover engine shared by both operations
        prompt_builder: Builds the chat and outline requests
        messages: Renders non-success outcomes to user-facing text
    """

    def __init__(
        self,
        engine: FailoverEngine,
        prompt_builder: PromptBuilder,
        messages: FailureMessages = DEFAULT_MESSAGES,
    ):
        self.engine = engine
        self.prompt_builder = prompt_builder
        self.messages = messages

    async def send_message(
        self, text: str, attachment: Optional[InlineAttachment] = None
    ) -> str:
        """
        Send a chat message, with an optional inline attachment.

        Returns:
            Model text, or the safety/filtered/overload message
        """
        request = self.prompt_builder.build_chat_request(text, attachment)
        outcome = await self._execute("send_message", request)

        if outcome is None:
            return self.messages.for_outcome(OutcomeKind.EXHAUSTED)
        if outcome.kind == OutcomeKind.SUCCESS:
            return outcome.text
        return self.messages.for_outcome(outcome.kind)

    async def generate_outline(self, topic: str) -> Optional[str]:
        """
        Generate a hierarchical plain-text mind map for `topic`.

        Returns:
            Outline text, the safety/filtered message, or None when every
            credential failed
        """
        request = self.prompt_builder.build_outline_request(topic)
        outcome = await self._execute("generate_outline", request)

        if outcome is None:
            return None
        if outcome.kind == OutcomeKind.SUCCESS:
            return outcome.text
        return self.messages.for_outcome(outcome.kind)

    async def _execute(
        self, operation: str, request: GenerationRequest
    ) -> Optional[CallOutcome]:
        """Run the engine; None means the pool was exhausted."""
        try:
            outcome = await self.engine.execute(request)
        except RetryExhausted as e:
            call_outcomes_total.labels(
                operation=operation, outcome=OutcomeKind.EXHAUSTED.value
            ).inc()
            logger.error(
                "Logical call exhausted all credentials",
                operation=operation,
                total_attempts=e.retry_metadata.total_attempts,
                last_error_type=e.last_failure.get("error_type"),
            )
            return None

        call_outcomes_total.labels(operation=operation, outcome=outcome.kind.value).inc()
        logger.info(
            "Logical call finished",
            operation=operation,
            outcome=outcome.kind.value,
            total_attempts=outcome.metadata.total_attempts,
        )
        return outcome

    async def aclose(self) -> None:
        """Release the underlying HTTP connections."""
        await self.engine.client.close()


def build_service(app_settings: Settings) -> GatewayService:
    """Wire a GatewayService from settings."""
    pool = CredentialPool(app_settings.API_KEYS)
    client = GeminiClient(
        endpoint_url=app_settings.generate_url,
        timeout=app_settings.REQUEST_TIMEOUT,
    )
    prompt_builder = PromptBuilder(
        system_instruction=app_settings.SYSTEM_INSTRUCTION,
        chat_temperature=app_settings.CHAT_TEMPERATURE,
        chat_max_output_tokens=app_settings.CHAT_MAX_OUTPUT_TOKENS,
        outline_temperature=app_settings.OUTLINE_TEMPERATURE,
    )
    engine = FailoverEngine(
        client=client,
        pool=pool,
        backoff_seconds=app_settings.RETRY_BACKOFF_SECONDS,
    )
    return GatewayService(engine=engine, prompt_builder=prompt_builder)


@lru_cache()
def get_service() -> GatewayService:
    """
    Get the process-wide service singleton.

    Uses @lru_cache so every caller shares one credential pool and one
    HTTP connection pool. Call it at startup: a misconfigured environment
    raises pydantic.ValidationError here, before any message is sent.
    """
    app_settings = get_settings()
    configure_logging(app_settings.LOG_LEVEL, app_settings.ENVIRONMENT)
    return build_service(app_settings)


async def send_message(text: str, attachment: Optional[InlineAttachment] = None) -> str:
    """Module-level shortcut for get_service().send_message()."""
    return await get_service().send_message(text, attachment)


async def generate_outline(topic: str) -> Optional[str]:
    """Module-level shortcut for get_service().generate_outline()."""
    return await get_service().generate_outline(topic)
