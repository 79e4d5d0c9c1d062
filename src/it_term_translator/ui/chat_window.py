"""Chat Window - Application shell with message log, input row and error banner."""

from pathlib import Path
from typing import Callable, List, Optional

from typing_extensions import override

from PySide6.QtCore import QMimeData, Qt, QTimer, Signal
from PySide6.QtGui import QAction, QContextMenuEvent, QKeyEvent, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QApplication,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMenu,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from it_term_translator.core import ChatMessage
from it_term_translator.services import ImageSource
from it_term_translator.ui.message_bubble import MessageBubble, TypingIndicator

PasteHandler = Callable[[Optional[QMimeData]], bool]

IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.gif *.webp *.bmp);;All files (*)"

# Object name Qt gives the Paste action of a line edit context menu
PASTE_ACTION_NAME = "edit-paste"


class TermInput(QLineEdit):
    """
    Line edit that offers clipboard pastes to a handler first.

    If the handler consumes the paste (the clipboard held an image) the default
    text paste is suppressed. Keyboard pastes and the context menu's Paste
    action both go through the handler.
    """

    def __init__(self):
        super().__init__()
        self.paste_handler: Optional[PasteHandler] = None

    @override
    def keyPressEvent(self, event: QKeyEvent):
        if event.matches(QKeySequence.StandardKey.Paste) and self.offer_paste():
            event.accept()
            return
        super().keyPressEvent(event)

    @override
    def contextMenuEvent(self, event: QContextMenuEvent):
        menu = self.create_context_menu()
        menu.exec(event.globalPos())
        menu.deleteLater()

    def create_context_menu(self) -> QMenu:
        """Standard line edit menu with its Paste action rerouted to ``paste_text``."""
        menu = self.createStandardContextMenu()
        paste_action = menu.findChild(QAction, PASTE_ACTION_NAME)
        if paste_action is not None:
            paste_action.triggered.disconnect()
            paste_action.triggered.connect(self.paste_text)
            # Qt disables Paste when the clipboard holds no text, e.g. a screenshot
            if self.paste_handler is not None and not self.isReadOnly():
                paste_action.setEnabled(True)
        return menu

    def paste_text(self):
        if not self.offer_paste():
            self.paste()

    def offer_paste(self) -> bool:
        if self.paste_handler is None:
            return False
        return self.paste_handler(QApplication.clipboard().mimeData())


class ChatWindow(QMainWindow):
    """Displays the conversation and forwards user actions to the coordinator."""

    # Signal emitted when the user submits a typed term
    text_submitted = Signal(str)
    # Signal emitted with an ImageSource picked from disk
    image_selected = Signal(object)

    def __init__(self):
        super().__init__()
        self.setWindowTitle("IT Terminology Translator")
        self.setGeometry(100, 100, 720, 800)

        self._is_loading = False
        self._bubbles: List[MessageBubble] = []
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        header = QLabel("IT Terminology Translator")
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header.setStyleSheet("font-size: 18px; font-weight: bold; padding: 12px 12px 0 12px;")
        main_layout.addWidget(header)

        subtitle = QLabel("Dịch thuật ngữ IT Anh-Việt với Gemini")
        subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        subtitle.setStyleSheet("color: gray; padding-bottom: 8px;")
        main_layout.addWidget(subtitle)

        # Message log
        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        log_widget = QWidget()
        self.log_layout = QVBoxLayout(log_widget)
        self.log_layout.setContentsMargins(16, 16, 16, 16)
        self.log_layout.setSpacing(12)
        self.log_layout.addStretch()
        self.scroll_area.setWidget(log_widget)
        main_layout.addWidget(self.scroll_area, 1)

        self.typing_indicator = TypingIndicator()
        self.typing_indicator.hide()
        self.log_layout.addWidget(self.typing_indicator)

        # Error banner
        self.banner_label = QLabel("")
        self.banner_label.setWordWrap(True)
        self.banner_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.banner_label.setStyleSheet("color: #f87171; padding: 4px 16px;")
        self.banner_label.hide()
        main_layout.addWidget(self.banner_label)

        # Input row
        input_row = QHBoxLayout()
        input_row.setContentsMargins(12, 12, 12, 12)

        self.image_button = QPushButton("Ảnh")
        self.image_button.setToolTip("Upload an image for translation")
        self.image_button.clicked.connect(self._on_pick_image)
        input_row.addWidget(self.image_button)

        self.term_input = TermInput()
        self.term_input.setPlaceholderText("Nhập thuật ngữ, dán hoặc tải ảnh...")
        self.term_input.returnPressed.connect(self._on_submit)
        self.term_input.textChanged.connect(self._update_send_button)
        input_row.addWidget(self.term_input, 1)

        self.send_button = QPushButton("Gửi")
        self.send_button.setToolTip("Send message")
        self.send_button.clicked.connect(self._on_submit)
        input_row.addWidget(self.send_button)

        main_layout.addLayout(input_row)
        self._update_send_button()

        # Pastes while focus is outside the input field
        self.paste_shortcut = QShortcut(QKeySequence.StandardKey.Paste, self)
        self.paste_shortcut.activated.connect(self.term_input.offer_paste)

    def set_coordinator(self, coordinator):
        """Inject the coordinator and wire signals in both directions.

        The coordinator is expected to expose:
        - submit_text(str), submit_image(ImageSource), submit_paste(QMimeData)
        - message_appended, loading_changed, error_changed signals
        - messages, is_loading, error
        """
        self._coordinator = coordinator

        self.text_submitted.connect(coordinator.submit_text)
        self.image_selected.connect(coordinator.submit_image)
        self.term_input.paste_handler = coordinator.submit_paste

        coordinator.message_appended.connect(self.add_message)
        coordinator.loading_changed.connect(self.set_loading)
        coordinator.error_changed.connect(self.show_banner)

        for message in coordinator.messages:
            self.add_message(message)
        self.set_loading(coordinator.is_loading)
        self.show_banner(coordinator.error or "")

    def add_message(self, message: ChatMessage):
        """Append a bubble above the typing indicator."""
        bubble = MessageBubble(message)
        self._bubbles.append(bubble)
        self.log_layout.insertWidget(self.log_layout.count() - 1, bubble)
        self._scroll_to_bottom()

    def set_loading(self, is_loading: bool):
        """Disable inputs and show the typing indicator while a request runs."""
        self._is_loading = is_loading
        self.typing_indicator.setVisible(is_loading)
        self.term_input.setEnabled(not is_loading)
        self.image_button.setEnabled(not is_loading)
        self._update_send_button()
        if not is_loading:
            self.term_input.setFocus()
        self._scroll_to_bottom()

    def show_banner(self, text: str):
        self.banner_label.setText(text)
        self.banner_label.setVisible(bool(text))

    @property
    def bubbles(self) -> List[MessageBubble]:
        return list(self._bubbles)

    def _on_submit(self):
        text = self.term_input.text()
        if text.strip() and not self._is_loading:
            self.text_submitted.emit(text)
            self.term_input.clear()

    def _on_pick_image(self):
        """Handle the image button."""
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Chọn ảnh chứa thuật ngữ",
            str(Path.home()),
            IMAGE_FILTER,
        )

        if file_path:
            self.image_selected.emit(ImageSource.from_path(Path(file_path)))

    def _update_send_button(self):
        self.send_button.setEnabled(not self._is_loading and bool(self.term_input.text().strip()))

    def _scroll_to_bottom(self):
        bar = self.scroll_area.verticalScrollBar()
        QTimer.singleShot(0, lambda: bar.setValue(bar.maximum()))
