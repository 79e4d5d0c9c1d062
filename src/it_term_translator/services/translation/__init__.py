"""Translation services - abstract interface and Gemini implementation."""

from it_term_translator.services.translation.translation_service import TranslationService
from it_term_translator.services.translation.gemini_translation_service import GeminiTranslationService
from it_term_translator.services.translation.prompts import (
    NO_IT_TERM_FOUND,
    OCR_AND_TRANSLATE_PROMPT,
    TRANSLATION_SYSTEM_INSTRUCTION,
)

__all__ = [
    "TranslationService",
    "GeminiTranslationService",
    "NO_IT_TERM_FOUND",
    "OCR_AND_TRANSLATE_PROMPT",
    "TRANSLATION_SYSTEM_INSTRUCTION",
]
