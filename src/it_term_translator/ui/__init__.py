"""UI layer - PySide6 presentation components."""

from .chat_window import ChatWindow, TermInput
from .message_bubble import MessageBubble, TypingIndicator

__all__ = ["ChatWindow", "TermInput", "MessageBubble", "TypingIndicator"]
