"""Chat message data class used by the chat client session."""

from dataclasses import dataclass
from enum import Enum


class Sender(str, Enum):
    """Author of a chat message."""

    USER = "user"
    BOT = "bot"


@dataclass(frozen=True)
class ChatMessage:
    """A single message in a client chat session.

    Attributes:
        sender: Who wrote the message
        text: Message text as displayed
    """

    sender: Sender
    text: str

    @property
    def is_user(self) -> bool:
        return self.sender is Sender.USER
