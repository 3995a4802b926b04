"""Port for the generative text service used for marketing copy and
sales summaries.  The Gemini adapter lives in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class TextGenerationError(Exception):
    """The text service could not produce an answer."""


class TextGenerator(ABC):

    @abstractmethod
    def generate(self, prompt: str, temperature: float) -> str:
        """Return the generated text, or "" if the service returned none.

        Raises TextGenerationError on transport or API failure.
        """
