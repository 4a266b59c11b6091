"""
Gemini-specific data models for the request/response cycle.

Requests are immutable pydantic models that render the exact REST payload
expected by generateContent. Responses are a tagged union produced by the
classifier, and AttemptResult tags the outcome of one physical attempt.
"""

from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from gemini_gateway.models.enums import (
    HarmBlockThreshold,
    HarmCategory,
    ResponseKind,
)


# === Request models ===


class InlineAttachment(BaseModel):
    """Binary attachment sent inline with a user turn (e.g. an image)."""
    model_config = ConfigDict(frozen=True)

    mime_type: str = Field(..., min_length=1, description="Media type, e.g. 'image/png'")
    data: str = Field(..., description="Base64-encoded payload")


class Part(BaseModel):
    """One part of a conversation turn: text or an inline attachment."""
    model_config = ConfigDict(frozen=True)

    text: Optional[str] = None
    inline_data: Optional[InlineAttachment] = None

    def to_payload(self) -> Dict[str, Any]:
        if self.inline_data is not None:
            return {
                "inline_data": {
                    "mime_type": self.inline_data.mime_type,
                    "data": self.inline_data.data,
                }
            }
        return {"text": self.text or ""}


class Content(BaseModel):
    """A conversation turn. Role is omitted for single-shot prompts."""
    model_config = ConfigDict(frozen=True)

    role: Optional[Literal["user", "model"]] = None
    parts: tuple[Part, ...] = Field(..., min_length=1)

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"parts": [part.to_payload() for part in self.parts]}
        if self.role is not None:
            payload = {"role": self.role, **payload}
        return payload


class SafetySetting(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: HarmCategory
    threshold: HarmBlockThreshold


class GenerationConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: float = Field(..., ge=0.0, le=2.0, description="Sampling temperature")
    max_output_tokens: Optional[int] = Field(
        default=None, ge=1, description="Maximum output tokens (provider default if unset)"
    )


class GenerationRequest(BaseModel):
    """
    Immutable generation request for one logical call.

    Built by PromptBuilder, owned by a single in-flight call and rendered
    to JSON once per physical attempt via to_payload().
    """
    model_config = ConfigDict(frozen=True)

    contents: tuple[Content, ...] = Field(..., min_length=1)
    system_instruction: Optional[str] = None
    generation_config: GenerationConfig
    safety_settings: tuple[SafetySetting, ...] = ()

    def to_payload(self) -> Dict[str, Any]:
        """Render the generateContent REST body."""
        generation_config: Dict[str, Any] = {"temperature": self.generation_config.temperature}
        if self.generation_config.max_output_tokens is not None:
            generation_config["maxOutputTokens"] = self.generation_config.max_output_tokens

        payload: Dict[str, Any] = {
            "contents": [content.to_payload() for content in self.contents],
        }
        if self.system_instruction is not None:
            payload["system_instruction"] = {"parts": [{"text": self.system_instruction}]}
        payload["generationConfig"] = generation_config
        payload["safetySettings"] = [
            {"category": s.category.value, "threshold": s.threshold.value}
            for s in self.safety_settings
        ]
        return payload


# === Provider response (classifier output) ===


class Success(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[ResponseKind.SUCCESS] = ResponseKind.SUCCESS
    text: str = Field(..., min_length=1)


class SafetyBlocked(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[ResponseKind.SAFETY_BLOCKED] = ResponseKind.SAFETY_BLOCKED
    block_reason: str = Field(..., description="promptFeedback.blockReason as sent by the provider")


class FilteredEmpty(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[ResponseKind.FILTERED_EMPTY] = ResponseKind.FILTERED_EMPTY
    finish_reason: Optional[str] = Field(
        default=None, description="Non-STOP finish reason, None when no candidate was returned"
    )


class Malformed(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[ResponseKind.MALFORMED] = ResponseKind.MALFORMED


ProviderResponse = Union[Success, SafetyBlocked, FilteredEmpty, Malformed]


# === Attempt boundary ===


class TransportFailure(BaseModel):
    """A physical attempt that produced no decodable JSON object."""
    model_config = ConfigDict(frozen=True)

    reason: str
    error_type: str = Field(..., description="Exception class that caused the failure")
    status_code: Optional[int] = None
    details: Dict[str, Any] = Field(default_factory=dict)


class Classified(BaseModel):
    """A physical attempt that returned a 2xx JSON body, already classified."""
    model_config = ConfigDict(frozen=True)

    response: ProviderResponse = Field(..., discriminator="kind")


AttemptResult = Union[TransportFailure, Classified]
