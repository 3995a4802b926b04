"""Application service: AI-written product description.

Never raises on service failure; the admin gets a fallback message and
can retry.
"""

from __future__ import annotations

import logging

from storefront.application.text_generation import TextGenerationError, TextGenerator
from storefront.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7
EMPTY_RESPONSE = "No description generated."
FAILURE_MESSAGE = "Failed to generate description. Please try again."


class GenerateProductDescriptionHandler:

    def __init__(self, generator: TextGenerator) -> None:
        self._generator = generator

    def handle(self, name: str, category: str, brand: str) -> str:
        if not (name and category and brand):
            raise ValidationError(
                "Please provide name, brand, and category first for AI generation"
            )

        prompt = (
            f'Generate a compelling, SEO-friendly product description for an item '
            f'called "{name}" by "{brand}" in the "{category}" category. '
            f"Focus on quality and brand value. Keep it under 100 words."
        )
        try:
            text = self._generator.generate(prompt, temperature=TEMPERATURE)
        except TextGenerationError as exc:
            logger.warning("AI description generation failed: %s", exc)
            return FAILURE_MESSAGE
        return text.strip() or EMPTY_RESPONSE
