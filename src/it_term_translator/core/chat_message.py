"""Chat message entity - one entry in the conversation log."""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple


class Sender(str, Enum):
    """Who authored a message."""

    USER = "user"
    BOT = "bot"


@dataclass(frozen=True)
class ChatMessage:
    """A single bubble in the chat log.

    Messages are immutable once created; the log only ever grows.
    """

    id: int
    text: str
    sender: Sender
    is_error: bool = False
    image_url: Optional[str] = None  # data-URL, user messages from image input only

    @property
    def is_user(self) -> bool:
        return self.sender is Sender.USER

    @property
    def is_bot(self) -> bool:
        return self.sender is Sender.BOT


@dataclass(frozen=True)
class ConversationSnapshot:
    """Read-only view of the conversation state handed to the UI."""

    messages: Tuple[ChatMessage, ...]
    is_loading: bool
    error: Optional[str] = None


class MessageIdGenerator:
    """
    Issues strictly increasing message ids based on wall-clock milliseconds.

    When two ids are requested within the same millisecond (or the clock steps
    back), the next id is the previous one plus one.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.time
        self._last_id = 0

    def next_id(self) -> int:
        candidate = int(self._clock() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate
