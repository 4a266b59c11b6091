"""
Enumerations for Gemini gateway data models.

All enums are closed taxonomies - no values outside these sets are permitted.
"""

from enum import Enum


class HarmCategory(str, Enum):
    """Content-policy categories understood by the Gemini API."""

    HARASSMENT = "HARM_CATEGORY_HARASSMENT"
    HATE_SPEECH = "HARM_CATEGORY_HATE_SPEECH"
    SEXUALLY_EXPLICIT = "HARM_CATEGORY_SEXUALLY_EXPLICIT"
    DANGEROUS_CONTENT = "HARM_CATEGORY_DANGEROUS_CONTENT"


class HarmBlockThreshold(str, Enum):
    """
    Permissiveness level per harm category.

    Ordered from most permissive (BLOCK_NONE) to strictest.
    """

    BLOCK_NONE = "BLOCK_NONE"
    BLOCK_ONLY_HIGH = "BLOCK_ONLY_HIGH"
    BLOCK_MEDIUM_AND_ABOVE = "BLOCK_MEDIUM_AND_ABOVE"
    BLOCK_LOW_AND_ABOVE = "BLOCK_LOW_AND_ABOVE"


class ResponseKind(str, Enum):
    """Classification of a single well-formed provider response."""

    SUCCESS = "success"
    SAFETY_BLOCKED = "safety_blocked"
    FILTERED_EMPTY = "filtered_empty"
    MALFORMED = "malformed"


class OutcomeKind(str, Enum):
    """
    Externally visible result of one logical call.

    SUCCESS carries text; the others are rendered by FailureMessages.
    """

    SUCCESS = "success"
    SAFETY_BLOCKED = "safety_blocked"
    FILTERED = "filtered"
    EXHAUSTED = "exhausted"


# Finish reason the provider reports on a normal completion
FINISH_REASON_STOP = "STOP"
