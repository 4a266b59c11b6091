"""
Pydantic data models for the Gemini gateway.

Includes:
- Enums (HarmCategory, HarmBlockThreshold, ResponseKind, OutcomeKind)
- Request models (GenerationRequest, Content, Part, InlineAttachment, ...)
- Provider response union (Success, SafetyBlocked, FilteredEmpty, Malformed)
- Attempt boundary union (TransportFailure, Classified)
"""

from gemini_gateway.models.enums import (
    FINISH_REASON_STOP,
    HarmBlockThreshold,
    HarmCategory,
    OutcomeKind,
    ResponseKind,
)
from gemini_gateway.models.llm_models import (
    AttemptResult,
    Classified,
    Content,
    FilteredEmpty,
    GenerationConfig,
    GenerationRequest,
    InlineAttachment,
    Malformed,
    Part,
    ProviderResponse,
    SafetyBlocked,
    SafetySetting,
    Success,
    TransportFailure,
)

__all__ = [
    # Enums
    "FINISH_REASON_STOP",
    "HarmBlockThreshold",
    "HarmCategory",
    "OutcomeKind",
    "ResponseKind",
    # Request models
    "Content",
    "GenerationConfig",
    "GenerationRequest",
    "InlineAttachment",
    "Part",
    "SafetySetting",
    # Provider response
    "ProviderResponse",
    "Success",
    "SafetyBlocked",
    "FilteredEmpty",
    "Malformed",
    # Attempt boundary
    "AttemptResult",
    "Classified",
    "TransportFailure",
]
