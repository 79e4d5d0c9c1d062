"""Ingested image entity - an image split into MIME type and base64 payload."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IngestedImage:
    """Image ready to be sent to the translation oracle."""

    mime_type: str
    base64_payload: str
    preview_url: str  # the full data-URL, used for the chat bubble preview
