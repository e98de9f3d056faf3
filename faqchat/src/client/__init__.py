"""Chat client package."""

from .chat_session import ChatSession

__all__ = ["ChatSession"]
