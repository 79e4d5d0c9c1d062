"""Message Bubble - Renders one chat message and the typing indicator."""

import base64
import binascii
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from it_term_translator.core import ChatMessage

USER_STYLE = "background-color: #2563eb; color: white; border-radius: 12px;"
BOT_STYLE = "background-color: #374151; color: #e5e7eb; border-radius: 12px;"
ERROR_STYLE = (
    "background-color: rgba(153, 27, 27, 0.5); color: #e5e7eb; "
    "border: 1px solid #dc2626; border-radius: 12px;"
)

MAX_BUBBLE_WIDTH = 420
MAX_PREVIEW_HEIGHT = 192


def pixmap_from_data_url(data_url: str) -> Optional[QPixmap]:
    """Decode a ``data:<mime>;base64,<payload>`` URL into a pixmap."""
    _, _, payload = data_url.partition(",")
    if not payload:
        return None
    try:
        raw = base64.b64decode(payload)
    except (binascii.Error, ValueError):
        return None

    pixmap = QPixmap()
    if not pixmap.loadFromData(raw):
        return None
    return pixmap


class MessageBubble(QWidget):
    """A chat bubble aligned right for the user and left for the bot."""

    def __init__(self, message: ChatMessage):
        super().__init__()
        self.message = message

        row = QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0)

        self.frame = QFrame()
        self.frame.setMaximumWidth(MAX_BUBBLE_WIDTH)
        self.frame.setStyleSheet(self._style())

        inner = QVBoxLayout(self.frame)
        inner.setContentsMargins(12, 8, 12, 8)

        self.image_label: Optional[QLabel] = None
        if message.image_url:
            pixmap = pixmap_from_data_url(message.image_url)
            if pixmap is not None:
                self.image_label = QLabel()
                self.image_label.setPixmap(
                    pixmap.scaled(
                        MAX_BUBBLE_WIDTH - 24,
                        MAX_PREVIEW_HEIGHT,
                        Qt.AspectRatioMode.KeepAspectRatio,
                        Qt.TransformationMode.SmoothTransformation,
                    )
                )
                inner.addWidget(self.image_label)

        self.text_label = QLabel(message.text)
        self.text_label.setWordWrap(True)
        self.text_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.text_label.setStyleSheet("background: transparent; border: none;")
        inner.addWidget(self.text_label)

        if message.is_user:
            row.addStretch()
            row.addWidget(self.frame)
        else:
            row.addWidget(self.frame)
            row.addStretch()

    def _style(self) -> str:
        if self.message.is_user:
            return USER_STYLE
        if self.message.is_error:
            return ERROR_STYLE
        return BOT_STYLE


class TypingIndicator(QWidget):
    """Bot-side placeholder shown while a request is pending."""

    def __init__(self):
        super().__init__()
        row = QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0)

        label = QLabel("• • •")
        label.setStyleSheet(BOT_STYLE + " padding: 8px 16px; color: #9ca3af;")
        row.addWidget(label)
        row.addStretch()
