"""Data classes module for the FAQ chat assistant.

Classes:
    - FaqEntry: A question/answer pair from the FAQ database
    - RetrievalResult: FAQ entries matched for a query
    - QueryResult: Result of a query processing operation
    - ChatMessage: A message in a client chat session
Types:
    - Sender: Author of a chat message
"""

from faqchat.src.data_classes.chat_message import ChatMessage, Sender
from faqchat.src.data_classes.faq_entry import FaqEntry
from faqchat.src.data_classes.retrieval_result import (
    MAX_RETRIEVED_ENTRIES,
    RetrievalResult,
)
from faqchat.src.data_classes.query_result import QueryResult

__all__ = [
    "ChatMessage",
    "Sender",
    "FaqEntry",
    "RetrievalResult",
    "MAX_RETRIEVED_ENTRIES",
    "QueryResult",
]
