"""Image Ingestion - turns picked files and clipboard pastes into oracle payloads."""

import base64
import logging
import mimetypes
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from PySide6.QtCore import QBuffer, QIODevice, QMimeData
from PySide6.QtGui import QImage, QPixmap

from it_term_translator.core import IngestedImage
from it_term_translator.services.errors import (
    ImageReadError,
    InvalidImageTypeError,
    MalformedDataUrlError,
)

logger = logging.getLogger(__name__)

_DATA_URL_MIME = re.compile(r":(.*?);")


@dataclass(frozen=True)
class ImageSource:
    """
    A binary blob with a declared content type.

    The bytes are only pulled when ``read()`` is called, so a source built from
    a path can be validated on the UI thread and read on a worker.
    """

    content_type: str
    name: str
    reader: Callable[[], bytes]

    def read(self) -> bytes:
        return self.reader()

    @property
    def is_image(self) -> bool:
        return is_image_type(self.content_type)

    @classmethod
    def from_path(cls, path: Path) -> "ImageSource":
        """Build a source for a file on disk, guessing its type from the name."""
        path = Path(path)
        content_type, _ = mimetypes.guess_type(path.name)
        return cls(content_type=content_type or "", name=path.name, reader=path.read_bytes)

    @classmethod
    def from_bytes(cls, data: bytes, content_type: str, name: str = "clipboard") -> "ImageSource":
        """Build a source for bytes already held in memory."""
        payload = bytes(data)
        return cls(content_type=content_type, name=name, reader=lambda: payload)


def is_image_type(content_type: Optional[str]) -> bool:
    """True if the declared content type is an image type."""
    return bool(content_type) and content_type.lower().startswith("image/")


class ImageIngestor:
    """Validates, reads and splits image blobs into MIME type + base64 payload."""

    def ensure_image(self, source: ImageSource) -> None:
        """
        Reject sources that are not images.

        Raises:
            InvalidImageTypeError: if the declared type does not start with ``image/``.
        """
        if not source.is_image:
            raise InvalidImageTypeError(source.content_type)

    def read_data_url(self, source: ImageSource) -> str:
        """
        Read the whole blob and encode it as a data-URL.

        This blocks on I/O and is meant to run off the UI thread.

        Raises:
            ImageReadError: if the blob cannot be read.
        """
        try:
            data = source.read()
        except (OSError, ValueError) as e:
            raise ImageReadError(f"Could not read {source.name}: {e}") from e

        encoded = base64.b64encode(data).decode("ascii")
        logger.debug("Read %d bytes from %s (%s)", len(data), source.name, source.content_type)
        return f"data:{source.content_type};base64,{encoded}"

    def parse_data_url(self, data_url: str, fallback_mime_type: str = "") -> IngestedImage:
        """
        Split a data-URL on its first comma into MIME type and payload.

        Args:
            data_url: ``data:<mime>;base64,<payload>``
            fallback_mime_type: used when the header carries no MIME type.

        Raises:
            MalformedDataUrlError: if there is no payload segment.
        """
        header, _, payload = data_url.partition(",")
        if not payload:
            raise MalformedDataUrlError()

        match = _DATA_URL_MIME.search(header)
        mime_type = match.group(1) if match and match.group(1) else fallback_mime_type
        return IngestedImage(mime_type=mime_type, base64_payload=payload, preview_url=data_url)

    def ingest(self, source: ImageSource) -> IngestedImage:
        """Validate, read and parse a source in one call."""
        self.ensure_image(source)
        data_url = self.read_data_url(source)
        return self.parse_data_url(data_url, fallback_mime_type=source.content_type)


def image_from_clipboard(mime_data: Optional[QMimeData]) -> Optional[ImageSource]:
    """
    Pick the first image carried by a clipboard payload.

    Looks at raw ``image/*`` formats first, then copied local files with an
    image type, then a decoded clipboard bitmap (encoded as PNG). Everything
    else on the clipboard is ignored.

    Returns:
        An ImageSource, or None if the clipboard holds no image.
    """
    if mime_data is None:
        return None

    for fmt in mime_data.formats():
        if is_image_type(fmt):
            data = bytes(mime_data.data(fmt).data())
            if data:
                return ImageSource.from_bytes(data, fmt)

    if mime_data.hasUrls():
        for url in mime_data.urls():
            if not url.isLocalFile():
                continue
            source = ImageSource.from_path(Path(url.toLocalFile()))
            if source.is_image:
                return source

    if mime_data.hasImage():
        image = mime_data.imageData()
        if isinstance(image, QPixmap):
            image = image.toImage()
        if isinstance(image, QImage) and not image.isNull():
            return ImageSource.from_bytes(_encode_png(image), "image/png")

    return None


def _encode_png(image: QImage) -> bytes:
    buffer = QBuffer()
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    image.save(buffer, "PNG")
    buffer.close()
    return bytes(buffer.data().data())
