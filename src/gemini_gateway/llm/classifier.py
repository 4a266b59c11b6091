"""
Response classifier for decoded generateContent bodies.

Decision order (first match wins):
1. promptFeedback.blockReason present      -> SafetyBlocked
2. first candidate's first part has text   -> Success
3. first candidate did not finish on STOP  -> FilteredEmpty
4. anything else                           -> Malformed

Missing or ill-typed nested fields count as absent; classification never raises.
A part whose text is not a non-empty string (e.g. a number) has no text:
Success always carries a string the chat layer can render.
"""

from typing import Any, Optional

import structlog

from gemini_gateway.models.enums import FINISH_REASON_STOP
from gemini_gateway.models.llm_models import (
    FilteredEmpty,
    Malformed,
    ProviderResponse,
    SafetyBlocked,
    Success,
)


logger = structlog.get_logger(__name__)


def _get(container: Any, key: str) -> Any:
    if isinstance(container, dict):
        return container.get(key)
    return None


def _first(items: Any) -> Any:
    if isinstance(items, list) and items:
        return items[0]
    return None


def extract_block_reason(body: dict) -> Optional[str]:
    """Return promptFeedback.blockReason if the provider set one."""
    block_reason = _get(_get(body, "promptFeedback"), "blockReason")
    if not block_reason:
        return None
    return str(block_reason)


def extract_text(body: dict) -> Optional[str]:
    """Return candidates[0].content.parts[0].text, or None if absent/empty."""
    candidate = _first(_get(body, "candidates"))
    part = _first(_get(_get(candidate, "content"), "parts"))
    text = _get(part, "text")
    if isinstance(text, str) and text:
        return text
    return None


def extract_finish_reason(body: dict) -> Optional[str]:
    """Return candidates[0].finishReason, or None if there is no candidate."""
    finish_reason = _get(_first(_get(body, "candidates")), "finishReason")
    return str(finish_reason) if finish_reason is not None else None


def classify_response(body: dict) -> ProviderResponse:
    """
    Map a decoded provider body to one of the four response kinds.

    Args:
        body: JSON object returned with a 2xx status

    Returns:
        Success, SafetyBlocked, FilteredEmpty or Malformed
    """
    block_reason = extract_block_reason(body)
    if block_reason is not None:
        logger.warning("Prompt blocked by provider safety filters", block_reason=block_reason)
        return SafetyBlocked(block_reason=block_reason)

    text = extract_text(body)
    if text is not None:
        return Success(text=text)

    finish_reason = extract_finish_reason(body)
    if finish_reason != FINISH_REASON_STOP:
        # Valid response with no text: generation was cut by a filter
        logger.warning("Response filtered without text", finish_reason=finish_reason)
        return FilteredEmpty(finish_reason=finish_reason)

    logger.warning("Empty response with normal finish reason")
    return Malformed()
