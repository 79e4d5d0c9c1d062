"""Main entry point for the IT term translator application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from it_term_translator.coordinators import ConversationCoordinator
from it_term_translator.services import (
    GeminiTranslationService,
    ImageIngestor,
    MissingApiKeyError,
    SettingsManager,
    configure_logging,
)
from it_term_translator.ui import ChatWindow

logger = logging.getLogger(__name__)


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Configuration and logging
    settings = SettingsManager()
    configure_logging(settings.get_log_level())

    try:
        api_key = settings.require_gemini_api_key()
    except MissingApiKeyError as e:
        logger.critical("Cannot start: %s", e)
        return 1

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("IT Term Translator")
    app.setOrganizationName("ITTermTranslator")

    # 3. Initialize Infrastructure (one oracle client for the whole process)
    translation_service = GeminiTranslationService(
        api_key=api_key,
        model_name=settings.get_model_name(),
    )
    logger.info("Using Gemini model %s", translation_service.model_name)

    # 4. Instantiate Coordinator (Dependency Injection)
    coordinator = ConversationCoordinator(
        translation_service=translation_service,
        ingestor=ImageIngestor(),
    )

    # 5. Construct UI and wire it to the coordinator
    window = ChatWindow()
    window.set_coordinator(coordinator)

    # 6. Show UI and start event loop
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
