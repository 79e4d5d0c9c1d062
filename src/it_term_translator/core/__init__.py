"""Domain layer - Pure entities representing the conversation."""

from .chat_message import ChatMessage, ConversationSnapshot, MessageIdGenerator, Sender
from .ingested_image import IngestedImage

__all__ = [
    "ChatMessage",
    "ConversationSnapshot",
    "IngestedImage",
    "MessageIdGenerator",
    "Sender",
]
