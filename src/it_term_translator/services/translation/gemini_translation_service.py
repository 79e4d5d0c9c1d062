"""Gemini Translation Service - Implements EN→VI IT term translation via Google Gemini API."""

import base64
import binascii
import logging

import google.genai as genai
from google.genai import types

from it_term_translator.services.errors import OracleError
from it_term_translator.services.translation.prompts import (
    OCR_AND_TRANSLATE_PROMPT,
    TRANSLATION_SYSTEM_INSTRUCTION,
)
from it_term_translator.services.translation.translation_service import TranslationService

logger = logging.getLogger(__name__)


class GeminiTranslationService(TranslationService):
    """
    Translation service using Google Gemini API.

    Low temperature keeps translations deterministic. The client is built once
    and reused for the lifetime of the process.
    """

    DEFAULT_MODEL = "gemini-2.5-flash"
    TEMPERATURE = 0.2

    def __init__(self, api_key: str, model_name: str = DEFAULT_MODEL):
        self.model_name = model_name
        self._client = genai.Client(api_key=api_key)

    def translate_text(self, term: str) -> str:
        """
        Translate a typed English IT term to Vietnamese.

        Raises:
            OracleError: on any transport or model failure.
        """
        logger.info("Translating term %r with %s", term[:100], self.model_name)
        try:
            response = self._client.models.generate_content(
                model=self.model_name,
                contents=term,
                config=types.GenerateContentConfig(
                    system_instruction=TRANSLATION_SYSTEM_INSTRUCTION,
                    temperature=self.TEMPERATURE,
                ),
            )
        except Exception as e:
            logger.error("Error calling Gemini API: %s: %s", type(e).__name__, e)
            raise OracleError(self._describe_failure(e, "Failed to get translation from Gemini API.")) from e

        return self._response_text(response)

    def translate_image(self, mime_type: str, base64_payload: str) -> str:
        """
        OCR the most prominent IT term in an image and translate it.

        Raises:
            OracleError: on any transport or model failure, or an undecodable payload.
        """
        try:
            image_bytes = base64.b64decode(base64_payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise OracleError(f"Image payload is not valid base64: {e}") from e

        logger.info("Translating image (%s, %d bytes) with %s", mime_type, len(image_bytes), self.model_name)
        try:
            response = self._client.models.generate_content(
                model=self.model_name,
                contents=[
                    types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                    OCR_AND_TRANSLATE_PROMPT,
                ],
                config=types.GenerateContentConfig(
                    temperature=self.TEMPERATURE,
                ),
            )
        except Exception as e:
            logger.error("Error calling Gemini API for image translation: %s: %s", type(e).__name__, e)
            raise OracleError(
                self._describe_failure(e, "Failed to get translation from image via Gemini API.")
            ) from e

        return self._response_text(response)

    def _response_text(self, response) -> str:
        text = getattr(response, "text", None)
        if not text or not text.strip():
            logger.warning("Gemini returned an empty response")
            raise OracleError("Empty response from API")
        return text.strip()

    @staticmethod
    def _describe_failure(error: Exception, default: str) -> str:
        error_msg = str(error).lower()

        if "api_key" in error_msg or "api key" in error_msg or "authentication" in error_msg:
            return f"Invalid API key or request: {error}"
        elif "429" in error_msg or "resource_exhausted" in error_msg or "quota" in error_msg or "rate_limit" in error_msg:
            return "API quota exceeded. Please try again later."
        elif "deadline" in error_msg or "timeout" in error_msg or "timed out" in error_msg:
            return "Request timed out. Please check your connection."
        else:
            return default
