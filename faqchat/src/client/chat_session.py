"""Chat client session that talks to the chat API.

A session keeps its messages in memory only. While a request is outstanding
the session is marked as waiting and refuses new submissions.
"""

import logging
from typing import Any, List, Optional

import requests

from faqchat.conf.config import Config
from faqchat.conf.prompts import CHAT_APOLOGY, CHAT_GREETING
from faqchat.src.data_classes import ChatMessage, Sender

logger = logging.getLogger(__name__)


class ChatSession:
    """In-memory chat session with the FAQ chat API.

    Attributes:
        api_url (str): URL of the chat endpoint
        timeout (float): Request timeout in seconds
        messages (List[ChatMessage]): Messages of this session, oldest first
        is_waiting (bool): True while a request is outstanding
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        greeting: Optional[str] = CHAT_GREETING,
    ) -> None:
        self.api_url = api_url or Config.CHAT_API_URL
        self.timeout = timeout or Config.CHAT_CLIENT_TIMEOUT
        self.session = session or requests.Session()
        self.messages: List[ChatMessage] = []
        self.is_waiting = False

        if greeting:
            self.messages.append(ChatMessage(sender=Sender.BOT, text=greeting))

    def send(self, text: str) -> Optional[ChatMessage]:
        """Submit a user message and record the bot's reply.

        Any failure is replaced by a friendly apology message; the raw error
        is only logged.

        Args:
            text: Raw user input

        Returns:
            The bot message that was added, or None if nothing was submitted
        """
        user_text = text.strip()
        if not user_text or self.is_waiting:
            return None

        self.messages.append(ChatMessage(sender=Sender.USER, text=user_text))
        self.is_waiting = True
        try:
            reply = self._request_answer(user_text)
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"API error: {str(e)}")
            reply = CHAT_APOLOGY
        finally:
            self.is_waiting = False

        bot_message = ChatMessage(sender=Sender.BOT, text=reply)
        self.messages.append(bot_message)
        return bot_message

    def _request_answer(self, user_text: str) -> str:
        response = self.session.post(
            self.api_url, json={"userQuery": user_text}, timeout=self.timeout
        )
        response.raise_for_status()
        data: Any = response.json()
        if not isinstance(data, dict):
            raise ValueError("Chat API returned a body that is not a JSON object")
        answer = data.get("text")
        if not isinstance(answer, str):
            raise ValueError("Chat API returned a response without text")
        return answer
