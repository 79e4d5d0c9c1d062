"""
IT Term Translator - An English→Vietnamese IT terminology chat.

This package provides a desktop chat window that:
- Translates typed English IT terms with Google Gemini
- Reads the most prominent IT term from an uploaded or pasted image
- Keeps the conversation in memory for the session only
"""

__version__ = "0.1.0"

# Make key components available at package level
from it_term_translator.core import ChatMessage, ConversationSnapshot, IngestedImage, Sender

__all__ = [
    "ChatMessage",
    "ConversationSnapshot",
    "IngestedImage",
    "Sender",
]
