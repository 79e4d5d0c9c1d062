"""Async workers for non-blocking image reads and API calls using Qt threading."""

import logging

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from it_term_translator.core import IngestedImage
from it_term_translator.services.image_ingestion import ImageIngestor, ImageSource
from it_term_translator.services.translation import TranslationService

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(object)  # Exception
    translation_result = Signal(str)
    image_read = Signal(str)  # data-URL


class ImageReadWorker(QRunnable):
    """Reads an image blob into a data-URL in a background thread."""

    def __init__(self, ingestor: ImageIngestor, source: ImageSource):
        super().__init__()
        self.ingestor = ingestor
        self.source = source
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Read the blob; report the data-URL or the failure."""
        try:
            data_url = self.ingestor.read_data_url(self.source)
            self.signals.image_read.emit(data_url)
        except Exception as e:
            logger.warning("Image read failed for %s: %s", self.source.name, e)
            self.signals.error.emit(e)
        finally:
            self.signals.finished.emit()


class TranslationWorker(QRunnable):
    """
    Runs the text translation API call in a background thread.

    Emits translation_result on success, error with the raised exception otherwise.
    """

    def __init__(self, translation_service: TranslationService, term: str):
        super().__init__()
        self.translation_service = translation_service
        self.term = term
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation API call in background thread."""
        try:
            result = self.translation_service.translate_text(self.term)
            self.signals.translation_result.emit(result)
        except Exception as e:
            self.signals.error.emit(e)
        finally:
            self.signals.finished.emit()


class ImageTranslationWorker(QRunnable):
    """Runs the OCR-and-translate API call in a background thread."""

    def __init__(self, translation_service: TranslationService, image: IngestedImage):
        super().__init__()
        self.translation_service = translation_service
        self.image = image
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the image translation API call in background thread."""
        try:
            result = self.translation_service.translate_image(
                mime_type=self.image.mime_type,
                base64_payload=self.image.base64_payload,
            )
            self.signals.translation_result.emit(result)
        except Exception as e:
            self.signals.error.emit(e)
        finally:
            self.signals.finished.emit()
