"""Translation Service - Abstract EN→VI IT terminology oracle."""

from abc import ABC, abstractmethod


class TranslationService(ABC):
    """
    Abstract service for translating English IT terms to Vietnamese.

    Implementations (e.g., GeminiTranslationService) handle API calls and raise
    OracleError on any failure. A single call is one round trip; no retries.
    """

    @abstractmethod
    def translate_text(self, term: str) -> str:
        """
        Translate a typed English IT term.

        Args:
            term: Raw term as typed by the user.

        Returns:
            Trimmed Vietnamese translation.
        """
        pass

    @abstractmethod
    def translate_image(self, mime_type: str, base64_payload: str) -> str:
        """
        Find the most prominent IT term in an image and translate it.

        Args:
            mime_type: Image MIME type, e.g. ``image/png``.
            base64_payload: Base64-encoded image bytes.

        Returns:
            Trimmed Vietnamese translation, or the "no IT term found" sentence.
        """
        pass
