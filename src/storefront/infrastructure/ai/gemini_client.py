"""Gemini text generator wrapping the ``generateContent`` REST endpoint."""

from __future__ import annotations

import logging

import httpx

from storefront.application.text_generation import TextGenerationError, TextGenerator

logger = logging.getLogger(__name__)

GEMINI_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-3-flash-preview"


class GeminiTextGenerator(TextGenerator):

    def __init__(
        self,
        api_key: str | None,
        model: str = DEFAULT_MODEL,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._client = client or httpx.Client(base_url=GEMINI_BASE, timeout=timeout)

    def generate(self, prompt: str, temperature: float) -> str:
        if not self._api_key:
            raise TextGenerationError("No Gemini API key configured")

        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {"temperature": temperature},
        }
        try:
            resp = self._client.post(
                f"/models/{self._model}:generateContent",
                json=payload,
                headers={"x-goog-api-key": self._api_key},
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TextGenerationError(
                f"Gemini returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TextGenerationError(f"Could not reach Gemini: {exc}") from exc

        logger.debug("Gemini %s answered with HTTP %d", self._model, resp.status_code)
        try:
            body = resp.json()
        except ValueError as exc:
            raise TextGenerationError("Gemini returned a malformed response") from exc
        return _extract_text(body)

    def close(self) -> None:
        self._client.close()


def _extract_text(body: dict) -> str:
    """Concatenate the text parts of the first candidate; "" if none."""
    candidates = body.get("candidates") or []
    if not candidates:
        return ""
    parts = candidates[0].get("content", {}).get("parts") or []
    return "".join(part.get("text", "") for part in parts)
