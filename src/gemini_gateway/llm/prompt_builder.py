"""
Request builder for generateContent calls.

Responsible for:
- Wrapping chat text and an optional inline attachment into a user turn
- Rendering the outline (mind map) prompt from its Jinja2 template
- Attaching generation parameters and the content-policy thresholds

Builders are pure: no network I/O, deterministic for the same inputs.
"""

from pathlib import Path
from typing import Optional

import structlog
from jinja2 import Environment, FileSystemLoader

from gemini_gateway.models.enums import HarmBlockThreshold, HarmCategory
from gemini_gateway.models.llm_models import (
    Content,
    GenerationConfig,
    GenerationRequest,
    InlineAttachment,
    Part,
    SafetySetting,
)


logger = structlog.get_logger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "prompts"

# Product decision: the mentor persona must not be filtered by provider defaults
PERMISSIVE_SAFETY_SETTINGS: tuple[SafetySetting, ...] = tuple(
    SafetySetting(category=category, threshold=HarmBlockThreshold.BLOCK_NONE)
    for category in (
        HarmCategory.HARASSMENT,
        HarmCategory.HATE_SPEECH,
        HarmCategory.SEXUALLY_EXPLICIT,
        HarmCategory.DANGEROUS_CONTENT,
    )
)


class PromptBuilder:
    """
    Build GenerationRequest objects for the two public operations.

    Handles:
    - Chat turns (text + optional attachment, system instruction)
    - Outline prompt rendering (Jinja2)
    - Generation parameters and safety settings
    """

    def __init__(
        self,
        system_instruction: str,
        templates_dir: Path = DEFAULT_TEMPLATES_DIR,
        chat_temperature: float = 0.8,
        chat_max_output_tokens: int = 1000,
        outline_temperature: float = 0.5,
    ):
        """
        Initialize prompt builder.

        Args:
            system_instruction: Static persona text attached to chat requests
            templates_dir: Directory containing outline_prompt.txt
            chat_temperature: Sampling temperature for chat requests
            chat_max_output_tokens: Output token limit for chat requests
            outline_temperature: Sampling temperature for outline requests
        """
        self.system_instruction = system_instruction
        self.templates_dir = Path(templates_dir)
        self.chat_temperature = chat_temperature
        self.chat_max_output_tokens = chat_max_output_tokens
        self.outline_temperature = outline_temperature

        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            keep_trailing_newline=False,
            autoescape=False  # Prompts, not HTML
        )

        try:
            self.outline_template = self.jinja_env.get_template("outline_prompt.txt")
            logger.info("Loaded prompt templates", templates_dir=str(self.templates_dir))
        except Exception as e:
            logger.error("Failed to load prompt templates", error=str(e))
            raise

    def build_chat_request(
        self,
        text: str,
        attachment: Optional[InlineAttachment] = None,
    ) -> GenerationRequest:
        """
        Build a conversational request.

        The user turn carries the text first and the attachment (if any)
        second, as the provider expects for multimodal prompts.

        Args:
            text: Message typed by the user
            attachment: Optional inline binary (e.g. a screenshot)

        Returns:
            GenerationRequest with system instruction, 0.8 temperature,
            1000 output tokens and permissive safety settings
        """
        parts = [Part(text=text)]
        if attachment is not None:
            parts.append(Part(inline_data=attachment))

        logger.debug(
            "Building chat request",
            text_length=len(text),
            has_attachment=attachment is not None,
            mime_type=attachment.mime_type if attachment else None,
        )

        return GenerationRequest(
            contents=(Content(role="user", parts=tuple(parts)),),
            system_instruction=self.system_instruction or None,
            generation_config=GenerationConfig(
                temperature=self.chat_temperature,
                max_output_tokens=self.chat_max_output_tokens,
            ),
            safety_settings=PERMISSIVE_SAFETY_SETTINGS,
        )

    def build_outline_prompt(self, topic: str) -> str:
        """Render the mind-map instructions with the topic interpolated."""
        return self.outline_template.render(topic=topic).strip()

    def build_outline_request(self, topic: str) -> GenerationRequest:
        """
        Build a structured-outline request.

        No role, no system instruction and no output limit; the topic is
        not validated (an empty topic still yields a request).
        """
        prompt = self.build_outline_prompt(topic)

        logger.debug("Building outline request", topic_length=len(topic))

        return GenerationRequest(
            contents=(Content(parts=(Part(text=prompt),)),),
            generation_config=GenerationConfig(temperature=self.outline_temperature),
            safety_settings=PERMISSIVE_SAFETY_SETTINGS,
        )
