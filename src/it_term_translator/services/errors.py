"""Error taxonomy for ingestion, translation and configuration failures."""


class TranslatorError(Exception):
    """Base class for all application errors."""


class IngestionError(TranslatorError):
    """An image could not be turned into an oracle payload."""


class InvalidImageTypeError(IngestionError):
    """The selected or pasted file is not an image."""

    def __init__(self, content_type: str):
        super().__init__(f"Unsupported content type: {content_type or '(unknown)'}")
        self.content_type = content_type


class MalformedDataUrlError(IngestionError):
    """The encoded image has no payload segment."""

    def __init__(self, message: str = "Invalid image file format."):
        super().__init__(message)


class ImageReadError(IngestionError):
    """The image blob could not be read."""


class OracleError(TranslatorError):
    """The translation model call failed."""


class MissingApiKeyError(TranslatorError):
    """No API credential is configured."""
