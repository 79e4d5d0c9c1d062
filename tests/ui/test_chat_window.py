"""
Tests for ChatWindow and MessageBubble - validates rendering and wiring.
"""

import base64
from unittest.mock import MagicMock, patch

import pytest
from PySide6.QtCore import QByteArray, QMimeData
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QApplication

from it_term_translator.coordinators import ConversationCoordinator
from it_term_translator.core import ChatMessage, Sender
from it_term_translator.services import OracleError
from it_term_translator.ui import ChatWindow, MessageBubble, TermInput
from it_term_translator.ui.chat_window import PASTE_ACTION_NAME
from it_term_translator.ui.message_bubble import ERROR_STYLE, pixmap_from_data_url


@pytest.fixture
def mock_translation_service():
    service = MagicMock()
    service.translate_text = MagicMock(return_value="Giao diện lập trình ứng dụng (API)")
    return service


@pytest.fixture
def window():
    return ChatWindow()


@pytest.fixture
def wired_window(window, mock_translation_service, held_pool):
    coordinator = ConversationCoordinator(
        translation_service=mock_translation_service,
        thread_pool=held_pool,
    )
    window.set_coordinator(coordinator)
    return window, coordinator


class TestMessageBubble:
    def test_text_is_rendered(self):
        bubble = MessageBubble(ChatMessage(id=1, text="API", sender=Sender.BOT))
        assert bubble.text_label.text() == "API"
        assert bubble.image_label is None

    def test_error_bubble_uses_error_style(self):
        bubble = MessageBubble(ChatMessage(id=1, text="Lỗi", sender=Sender.BOT, is_error=True))
        assert bubble.frame.styleSheet() == ERROR_STYLE

    def test_image_preview_rendered(self, png_bytes):
        data_url = "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")
        bubble = MessageBubble(
            ChatMessage(id=1, text="Dịch thuật ngữ từ ảnh này:", sender=Sender.USER, image_url=data_url)
        )
        assert bubble.image_label is not None

    def test_broken_image_preview_skipped(self):
        bubble = MessageBubble(
            ChatMessage(id=1, text="x", sender=Sender.USER, image_url="data:image/png;base64,")
        )
        assert bubble.image_label is None

    def test_pixmap_from_garbage_is_none(self):
        assert pixmap_from_data_url("data:image/png;base64,bm90IGFuIGltYWdl") is None


class TestChatWindowRendering:
    def test_welcome_message_rendered_on_wiring(self, wired_window):
        window, coordinator = wired_window
        assert len(window.bubbles) == 1
        assert window.bubbles[0].message == coordinator.messages[0]

    def test_banner_hidden_initially(self, wired_window):
        window, _ = wired_window
        assert window.banner_label.isHidden()

    def test_show_banner(self, window):
        window.show_banner("Tệp không hợp lệ.")
        assert not window.banner_label.isHidden()
        assert window.banner_label.text() == "Tệp không hợp lệ."

        window.show_banner("")
        assert window.banner_label.isHidden()

    def test_loading_disables_inputs(self, window):
        window.set_loading(True)
        assert not window.term_input.isEnabled()
        assert not window.image_button.isEnabled()
        assert not window.send_button.isEnabled()
        assert not window.typing_indicator.isHidden()

        window.set_loading(False)
        assert window.term_input.isEnabled()
        assert window.image_button.isEnabled()
        assert window.typing_indicator.isHidden()

    def test_send_button_requires_text(self, window):
        assert not window.send_button.isEnabled()
        window.term_input.setText("API")
        assert window.send_button.isEnabled()
        window.term_input.setText("   ")
        assert not window.send_button.isEnabled()


class TestChatWindowWiring:
    def test_submit_forwards_text_and_clears_input(self, wired_window, held_pool):
        window, coordinator = wired_window
        window.term_input.setText("API")

        window._on_submit()

        assert window.term_input.text() == ""
        assert coordinator.messages[-1].text == "API"
        assert len(window.bubbles) == 2
        assert not window.term_input.isEnabled()

        held_pool.run_all()
        assert len(window.bubbles) == 3
        assert window.bubbles[-1].message.text == "Giao diện lập trình ứng dụng (API)"
        assert window.term_input.isEnabled()

    def test_failure_shows_banner_and_error_bubble(self, wired_window, held_pool, mock_translation_service):
        window, _ = wired_window
        mock_translation_service.translate_text.side_effect = OracleError("down")
        window.term_input.setText("cache")

        window._on_submit()
        held_pool.run_all()

        assert not window.banner_label.isHidden()
        assert "down" in window.banner_label.text()
        assert window.bubbles[-1].message.is_error

    def test_blank_submit_does_nothing(self, wired_window):
        window, coordinator = wired_window
        window.term_input.setText("   ")

        window._on_submit()

        assert len(coordinator.messages) == 1

    def test_picked_non_image_sets_banner(self, wired_window, tmp_path):
        window, coordinator = wired_window
        path = tmp_path / "notes.txt"
        path.write_text("hello")

        with patch(
            "it_term_translator.ui.chat_window.QFileDialog.getOpenFileName",
            return_value=(str(path), ""),
        ):
            window._on_pick_image()

        assert not window.banner_label.isHidden()
        assert len(coordinator.messages) == 1

    def test_cancelled_picker_does_nothing(self, wired_window):
        window, coordinator = wired_window
        with patch(
            "it_term_translator.ui.chat_window.QFileDialog.getOpenFileName",
            return_value=("", ""),
        ):
            window._on_pick_image()

        assert coordinator.error is None
        assert len(coordinator.messages) == 1


class TestTermInputPaste:
    def test_no_handler_lets_paste_through(self):
        term_input = TermInput()
        assert term_input.offer_paste() is False

    def test_handler_receives_clipboard(self):
        term_input = TermInput()
        handler = MagicMock(return_value=True)
        term_input.paste_handler = handler

        assert term_input.offer_paste() is True
        handler.assert_called_once()

    def test_wired_handler_is_coordinator(self, wired_window):
        window, coordinator = wired_window
        assert window.term_input.paste_handler == coordinator.submit_paste


class TestTermInputContextMenu:
    @pytest.fixture
    def clipboard(self):
        clipboard = QApplication.clipboard()
        yield clipboard
        clipboard.clear()

    def _paste_action(self, term_input):
        menu = term_input.create_context_menu()
        action = menu.findChild(QAction, PASTE_ACTION_NAME)
        assert action is not None
        return menu, action

    def test_menu_paste_offers_clipboard_to_handler(self, clipboard):
        clipboard.setText("cache")
        term_input = TermInput()
        handler = MagicMock(return_value=True)
        term_input.paste_handler = handler

        menu, action = self._paste_action(term_input)
        action.trigger()

        handler.assert_called_once()
        assert term_input.text() == ""
        menu.deleteLater()

    def test_menu_paste_falls_back_to_text(self, clipboard):
        clipboard.setText("cache")
        term_input = TermInput()
        term_input.paste_handler = MagicMock(return_value=False)

        menu, action = self._paste_action(term_input)
        action.trigger()

        assert term_input.text() == "cache"
        menu.deleteLater()

    def test_menu_paste_enabled_for_image_only_clipboard(self, clipboard, png_bytes):
        mime = QMimeData()
        mime.setData("image/png", QByteArray(png_bytes))
        clipboard.setMimeData(mime)
        term_input = TermInput()
        term_input.paste_handler = MagicMock(return_value=True)

        menu, action = self._paste_action(term_input)

        assert action.isEnabled()
        menu.deleteLater()

    def test_menu_paste_reaches_coordinator(self, wired_window, held_pool, clipboard, png_bytes):
        window, coordinator = wired_window
        mime = QMimeData()
        mime.setData("image/png", QByteArray(png_bytes))
        mime.setText("kernel panic")
        clipboard.setMimeData(mime)

        menu, action = self._paste_action(window.term_input)
        action.trigger()

        assert window.term_input.text() == ""
        assert coordinator.is_loading
        assert len(held_pool.started) == 1
        menu.deleteLater()
