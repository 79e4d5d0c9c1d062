"""Services layer - business logic and external integrations."""

from it_term_translator.services.errors import (
    ImageReadError,
    IngestionError,
    InvalidImageTypeError,
    MalformedDataUrlError,
    MissingApiKeyError,
    OracleError,
    TranslatorError,
)
from it_term_translator.services.settings_manager import SettingsManager
from it_term_translator.services.logging_setup import configure_logging

# Image ingestion
from it_term_translator.services.image_ingestion import ImageIngestor, ImageSource, image_from_clipboard

# Translation services
from it_term_translator.services.translation import TranslationService, GeminiTranslationService

# Background workers
from it_term_translator.services.api_workers import (
    ImageReadWorker,
    ImageTranslationWorker,
    TranslationWorker,
    WorkerSignals,
)

__all__ = [
    "TranslatorError",
    "IngestionError",
    "InvalidImageTypeError",
    "MalformedDataUrlError",
    "ImageReadError",
    "OracleError",
    "MissingApiKeyError",
    "SettingsManager",
    "configure_logging",
    "ImageIngestor",
    "ImageSource",
    "image_from_clipboard",
    "TranslationService",
    "GeminiTranslationService",
    "ImageReadWorker",
    "ImageTranslationWorker",
    "TranslationWorker",
    "WorkerSignals",
]
