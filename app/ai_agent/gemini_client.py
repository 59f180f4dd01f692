"""
Gemini API Client wrapper for Ria.
Handles connection to Google Gemini API, text generation and JSON extraction.
"""
import json
import logging
import re
from functools import lru_cache
from typing import Any, Optional

import google.generativeai as genai

from app.core.config import settings

logger = logging.getLogger(__name__)

_CODE_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)```", re.IGNORECASE)
_OBJECT_RE = re.compile(r"\{[\s\S]*\}")
_ARRAY_RE = re.compile(r"\[[\s\S]*\]")
_TRAILING_COMMA_RE = re.compile(r",\s*(\]|\})")

# finish_reason 1 = STOP, 2 = MAX_TOKENS
_ACCEPTED_FINISH_REASONS = (1, 2)


class GeminiError(Exception):
    """Raised when Gemini cannot produce a usable response."""


def extract_json(text: str, expect: str = "object") -> Any:
    """
    Pull the JSON payload out of a model response.

    Handles markdown code fences and prose around the payload, and repairs
    trailing commas before closing brackets.

    Args:
        text: Raw model output.
        expect: "object" or "array".

    Raises:
        GeminiError: If no parseable JSON of the expected kind is found.
    """
    if not text:
        raise GeminiError("Empty response from AI")

    fenced = _CODE_FENCE_RE.search(text)
    candidate_text = fenced.group(1) if fenced else text

    pattern = _ARRAY_RE if expect == "array" else _OBJECT_RE
    match = pattern.search(candidate_text) or pattern.search(text)
    if not match:
        raise GeminiError("Could not parse AI response")

    raw = match.group(0)
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning(f"Failed to parse AI JSON, retrying without trailing commas: {e}")

    try:
        return json.loads(_TRAILING_COMMA_RE.sub(r"\1", raw))
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON from AI: {raw[:500]}")
        raise GeminiError(f"Invalid JSON response from AI: {e}") from e


class GeminiClient:
    """
    Wrapper for Google Gemini API.
    The model is configured lazily so the application starts without an API key.
    """

    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None):
        """
        Args:
            api_key: Google Gemini API key. Defaults to settings.GEMINI_API_KEY.
            model_name: Gemini model to use. Defaults to settings.GEMINI_MODEL.
        """
        self.api_key = api_key or settings.GEMINI_API_KEY
        self.model_name = model_name or settings.GEMINI_MODEL
        self._model = None

        if not self.api_key:
            logger.warning("GEMINI_API_KEY not set - AI endpoints will fail until it is configured")

    def _get_model(self):
        if self._model is None:
            if not self.api_key:
                raise GeminiError("GEMINI_API_KEY not configured")
            genai.configure(api_key=self.api_key)
            self._model = genai.GenerativeModel(self.model_name)
            logger.info(f"GeminiClient initialized with model: {self.model_name}")
        return self._model

    def generate_content(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None
    ) -> str:
        """
        Generate text for a single prompt.

        Raises:
            GeminiError: If the call fails, is blocked, or returns no text.
        """
        model = self._get_model()
        generation_config = genai.types.GenerationConfig(
            temperature=temperature,
            max_output_tokens=max_tokens,
        )

        logger.info(f"Generating content with Gemini (temp={temperature}, model={self.model_name})")
        try:
            response = model.generate_content(prompt, generation_config=generation_config)
        except Exception as e:
            logger.error(f"Gemini API error: {str(e)}", exc_info=True)
            raise GeminiError("Gemini API request failed") from e

        if not response.candidates:
            raise GeminiError("No response from AI")

        candidate = response.candidates[0]
        finish_reason = getattr(candidate, 'finish_reason', None)
        if finish_reason and int(finish_reason) not in _ACCEPTED_FINISH_REASONS:
            raise GeminiError(f"Content was blocked by Gemini (finish_reason={finish_reason})")

        if not candidate.content or not candidate.content.parts:
            raise GeminiError("No response from AI")

        response_text = candidate.content.parts[0].text
        if not response_text:
            raise GeminiError("No response from AI")

        logger.info(f"Successfully generated content ({len(response_text)} chars)")
        return response_text

    def generate_json_content(
        self,
        prompt: str,
        expect: str = "object",
        temperature: float = 0.3,
        max_tokens: Optional[int] = 4096
    ) -> Any:
        """Generate and parse a JSON object or array. Lower temperature for structured output."""
        response_text = self.generate_content(prompt, temperature=temperature, max_tokens=max_tokens)
        return extract_json(response_text, expect=expect)


@lru_cache()
def get_gemini_client() -> GeminiClient:
    """FastAPI dependency returning the process-wide client."""
    return GeminiClient()
