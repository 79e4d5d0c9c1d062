"""Conversation Coordinator - Owns the message log and the single-flight request lifecycle."""

import logging
import threading
from enum import Enum
from typing import List, Optional

from PySide6.QtCore import QMimeData, QObject, QRunnable, QThreadPool, Signal, Slot

from it_term_translator.core import ChatMessage, ConversationSnapshot, MessageIdGenerator, Sender
from it_term_translator.services import (
    ImageIngestor,
    ImageReadWorker,
    ImageSource,
    ImageTranslationWorker,
    InvalidImageTypeError,
    MalformedDataUrlError,
    TranslationService,
    TranslationWorker,
    image_from_clipboard,
)

logger = logging.getLogger(__name__)

WELCOME_TEXT = (
    "Xin chào! Tôi là chatbot dịch thuật chuyên ngành IT. Hãy nhập một thuật ngữ tiếng Anh, "
    "tải ảnh hoặc dán ảnh chứa thuật ngữ để tôi dịch sang tiếng Việt."
)
IMAGE_REQUEST_TEXT = "Dịch thuật ngữ từ ảnh này:"

TEXT_FAILURE_REPLY = "Rất tiếc, tôi không thể xử lý yêu cầu của bạn lúc này. Vui lòng thử lại sau."
IMAGE_FAILURE_REPLY = "Rất tiếc, tôi không thể xử lý ảnh của bạn lúc này. Vui lòng thử lại sau."

TEXT_ERROR_BANNER = "Rất tiếc, đã có lỗi xảy ra: {message}"
IMAGE_ERROR_BANNER = "Rất tiếc, đã có lỗi xảy ra khi xử lý ảnh: {message}"
INVALID_FILE_BANNER = "Tệp không hợp lệ. Vui lòng chỉ chọn tệp hình ảnh."
READ_ERROR_BANNER = "Không thể đọc tệp ảnh. Vui lòng thử lại."

UNKNOWN_ERROR = "An unknown error occurred."


class RequestKind(str, Enum):
    TEXT = "text"
    IMAGE = "image"


class _OracleRequest(QObject):
    """Helper object receiving a translation worker's result on the main thread."""

    def __init__(self, kind: RequestKind, parent: "ConversationCoordinator"):
        super().__init__()
        self.kind = kind
        self.parent_ref = parent

    @Slot(str)
    def on_translation_result(self, text: str):
        self.parent_ref._handle_oracle_success(text)

    @Slot(object)
    def on_translation_error(self, error: Exception):
        self.parent_ref._handle_oracle_failure(error, self.kind)


class _ImageReadRequest(QObject):
    """Helper object receiving an image read result on the main thread."""

    def __init__(self, declared_type: str, parent: "ConversationCoordinator"):
        super().__init__()
        self.declared_type = declared_type
        self.parent_ref = parent

    @Slot(str)
    def on_image_read(self, data_url: str):
        self.parent_ref._handle_image_read(data_url, self.declared_type)

    @Slot(object)
    def on_read_error(self, error: Exception):
        self.parent_ref._handle_image_read_error(error)


class ConversationCoordinator(QObject):
    """
    Orchestrates the chat conversation.

    States are Idle (``is_loading`` False) and Pending (``is_loading`` True).
    At most one translation request is outstanding at any time; submissions
    made while Pending are dropped, not queued.

    Responsibilities:
    - Keep the append-only message log.
    - Guard submissions with the single busy flag.
    - Run image reads and oracle calls on the thread pool.
    - Turn every failure into banner text and, where a user message is
      waiting, an error reply.
    """

    message_appended = Signal(object)  # ChatMessage
    loading_changed = Signal(bool)
    error_changed = Signal(str)  # empty string clears the banner
    state_changed = Signal(object)  # ConversationSnapshot

    def __init__(
        self,
        translation_service: TranslationService,
        ingestor: Optional[ImageIngestor] = None,
        thread_pool: Optional[QThreadPool] = None,
        id_generator: Optional[MessageIdGenerator] = None,
    ):
        super().__init__()

        self.translation_service = translation_service
        self.ingestor = ingestor or ImageIngestor()
        self.thread_pool = thread_pool or QThreadPool.globalInstance()
        self._ids = id_generator or MessageIdGenerator()

        self._messages: List[ChatMessage] = []
        self._is_loading = False
        self._error: Optional[str] = None
        self._gate = threading.Lock()

        # Keep the helper alive while its worker runs in the background
        self._request_helper: Optional[QObject] = None

        self._append(WELCOME_TEXT, Sender.BOT)

    @property
    def messages(self) -> tuple:
        return tuple(self._messages)

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error(self) -> Optional[str]:
        return self._error

    def snapshot(self) -> ConversationSnapshot:
        return ConversationSnapshot(
            messages=tuple(self._messages),
            is_loading=self._is_loading,
            error=self._error,
        )

    def submit_text(self, term: str) -> bool:
        """
        Translate a typed term.

        Returns:
            True if a request was started, False if the submission was ignored
            (blank input or a request already pending).
        """
        if not term or not term.strip():
            return False

        if not self._try_begin():
            logger.info("Dropping text submission while a request is pending")
            return False

        self._append(term, Sender.USER)
        worker = TranslationWorker(translation_service=self.translation_service, term=term)
        self._start_oracle(worker, RequestKind.TEXT)
        return True

    def submit_image(self, source: ImageSource) -> bool:
        """
        Translate the IT term found in an image.

        A non-image source only sets the banner. The blob is read on the thread
        pool; the user message is appended once the read completes.

        Returns:
            True if a request was started.
        """
        if self._is_loading:
            logger.info("Dropping image submission while a request is pending")
            return False

        try:
            self.ingestor.ensure_image(source)
        except InvalidImageTypeError as e:
            logger.warning("Rejected %s: %s", source.name, e)
            self._set_error(INVALID_FILE_BANNER)
            return False

        if not self._try_begin():
            logger.info("Dropping image submission while a request is pending")
            return False

        worker = ImageReadWorker(ingestor=self.ingestor, source=source)
        helper = _ImageReadRequest(source.content_type, self)
        self._request_helper = helper

        worker.signals.image_read.connect(helper.on_image_read)
        worker.signals.error.connect(helper.on_read_error)

        self.thread_pool.start(worker)
        return True

    def submit_paste(self, mime_data: Optional[QMimeData]) -> bool:
        """
        Handle a clipboard paste.

        Returns:
            True if the clipboard carried an image and the default paste must be
            suppressed, False to let the default paste proceed.
        """
        source = image_from_clipboard(mime_data)
        if source is None:
            return False

        if self._is_loading:
            logger.info("Dropping pasted image while a request is pending")
            return True

        self.submit_image(source)
        return True

    def _try_begin(self) -> bool:
        """Atomically move Idle -> Pending and clear the banner."""
        with self._gate:
            if self._is_loading:
                return False
            self._is_loading = True

        self.loading_changed.emit(True)
        self._set_error(None)
        return True

    def _finish(self) -> None:
        """Move back to Idle. Called on every completion path."""
        with self._gate:
            self._is_loading = False
        self._request_helper = None
        self.loading_changed.emit(False)
        self._publish()

    def _start_oracle(self, worker: QRunnable, kind: RequestKind) -> None:
        helper = _OracleRequest(kind, self)
        self._request_helper = helper

        worker.signals.translation_result.connect(helper.on_translation_result)
        worker.signals.error.connect(helper.on_translation_error)

        self.thread_pool.start(worker)

    def _handle_image_read(self, data_url: str, declared_type: str) -> None:
        self._append(IMAGE_REQUEST_TEXT, Sender.USER, image_url=data_url)

        try:
            image = self.ingestor.parse_data_url(data_url, fallback_mime_type=declared_type)
        except MalformedDataUrlError as e:
            self._handle_oracle_failure(e, RequestKind.IMAGE)
            return

        worker = ImageTranslationWorker(translation_service=self.translation_service, image=image)
        self._start_oracle(worker, RequestKind.IMAGE)

    def _handle_image_read_error(self, error: Exception) -> None:
        logger.error("Could not read image: %s", error)
        try:
            self._set_error(READ_ERROR_BANNER)
        finally:
            self._finish()

    def _handle_oracle_success(self, text: str) -> None:
        try:
            self._append(text, Sender.BOT)
        finally:
            self._finish()

    def _handle_oracle_failure(self, error: Exception, kind: RequestKind) -> None:
        message = str(error) or UNKNOWN_ERROR
        logger.error("%s translation failed: %s", kind.value.capitalize(), message)

        if kind is RequestKind.IMAGE:
            banner, reply = IMAGE_ERROR_BANNER, IMAGE_FAILURE_REPLY
        else:
            banner, reply = TEXT_ERROR_BANNER, TEXT_FAILURE_REPLY

        try:
            self._set_error(banner.format(message=message))
            self._append(reply, Sender.BOT, is_error=True)
        finally:
            self._finish()

    def _append(
        self,
        text: str,
        sender: Sender,
        is_error: bool = False,
        image_url: Optional[str] = None,
    ) -> ChatMessage:
        message = ChatMessage(
            id=self._ids.next_id(),
            text=text,
            sender=sender,
            is_error=is_error,
            image_url=image_url,
        )
        self._messages.append(message)
        self.message_appended.emit(message)
        self._publish()
        return message

    def _set_error(self, error: Optional[str]) -> None:
        if error == self._error:
            return
        self._error = error
        self.error_changed.emit(error or "")
        self._publish()

    def _publish(self) -> None:
        self.state_changed.emit(self.snapshot())
