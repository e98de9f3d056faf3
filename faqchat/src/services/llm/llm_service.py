"""Service module for interacting with large language models.

This module provides a high-level interface for the supported LLM providers:
- Gemini: Google's Gemini REST API, optionally grounded with Google Search
- DeepSeek: DeepSeek's API (via OpenAI SDK)

Every provider call goes through the same bounded retry policy.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

import requests
from openai import APIConnectionError, APIStatusError, OpenAI

from faqchat.conf.config import Config
from faqchat.src.services.llm.exceptions import (
    LLMConfigurationError,
    LLMResponseError,
)
from faqchat.src.services.llm.retry import retry_with_backoff

logger = logging.getLogger(__name__)


class BaseLLMService(ABC):
    """Base class for LLM services.

    The RAG pipeline sends the whole augmented prompt as ``user_message`` and
    relies on the provider defaults. ``system_prompt``, ``max_tokens`` and
    ``extra_body`` are passthrough options for callers that talk to a provider
    directly; each service maps them onto its own request format.
    """

    @abstractmethod
    def generate_response(
        self,
        user_message: str,
        system_prompt: str = "",
        max_tokens: Optional[int] = None,
        extra_body: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Generate a response from the model based on input.

        Args:
            user_message: The message from the user
            system_prompt: System prompt to use for the generation
            max_tokens: Maximum number of tokens to generate. If None, uses service default
            extra_body: Additional provider-specific request fields

        Returns:
            str: Generated response text

        Raises:
            LLMConfigurationError: If the service is not configured
            LLMResponseError: If the provider returned no usable text
        """

    def ensure_configured(self) -> None:
        """Raise LLMConfigurationError if the service cannot make requests."""


class GeminiLLMService(BaseLLMService):
    """Service for interacting with Google's Gemini REST API.

    Attributes:
        api_key (Optional[str]): Gemini API key
        model_name (str): Name of the Gemini model
        web_search_grounding (bool): Whether the Google Search tool is sent along
        timeout (float): Per-attempt request timeout in seconds
        max_attempts (int): Total attempts per generation
        retry_base_delay (float): Base delay for the exponential backoff
        session (requests.Session): HTTP session used for the calls
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        web_search_grounding: Optional[bool] = None,
        timeout: Optional[float] = None,
        max_attempts: Optional[int] = None,
        retry_base_delay: Optional[float] = None,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the Gemini LLM service.

        Unset arguments fall back to the matching Config values. A missing API
        key does not fail here; requests are refused until one is provided.
        """
        self.api_key = api_key if api_key is not None else Config.GEMINI_API_KEY
        self.model_name = model_name or Config.GEMINI_MODEL_NAME
        self.web_search_grounding = (
            Config.WEB_SEARCH_GROUNDING
            if web_search_grounding is None
            else web_search_grounding
        )
        self.timeout = timeout or Config.LLM_REQUEST_TIMEOUT
        self.max_attempts = max_attempts or Config.LLM_MAX_ATTEMPTS
        self.retry_base_delay = (
            Config.LLM_RETRY_BASE_DELAY if retry_base_delay is None else retry_base_delay
        )
        self.session = session or requests.Session()
        self._sleep = sleep
        self.url = f"{Config.GEMINI_API_URL}/{self.model_name}:generateContent"

        if not self.api_key:
            logger.warning("GEMINI_API_KEY is not set, chat requests will be rejected")
        logger.info(
            f"Initialized Gemini LLM service with model: {self.model_name} "
            f"(web search grounding: {self.web_search_grounding})"
        )

    def ensure_configured(self) -> None:
        if not self.api_key:
            raise LLMConfigurationError(
                "GEMINI_API_KEY not set. Please check your .env file."
            )

    def build_payload(
        self,
        prompt: str,
        max_tokens: Optional[int] = None,
        extra_body: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Build the generateContent request body.

        Args:
            prompt: Full prompt text sent as a single user turn
            max_tokens: Maximum number of output tokens
            extra_body: Fields that replace or extend the default body

        Returns:
            JSON-serializable request body
        """
        payload: Dict[str, Any] = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": Config.GEMINI_TEMPERATURE,
                "topP": Config.GEMINI_TOP_P,
                "maxOutputTokens": max_tokens or Config.GEMINI_MAX_TOKENS,
            },
        }
        if self.web_search_grounding:
            payload["tools"] = [{"google_search": {}}]
        if extra_body:
            payload.update(extra_body)
        return payload

    def _post(self, payload: Dict[str, Any]) -> requests.Response:
        response = self.session.post(
            self.url,
            json=payload,
            headers={
                "Content-Type": "application/json",
                "x-goog-api-key": self.api_key or "",
            },
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response

    @staticmethod
    def extract_text(data: Any) -> str:
        """Pull the generated text out of a generateContent response body.

        Raises:
            LLMResponseError: If the text is missing or empty
        """
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            text = None

        if not isinstance(text, str) or not text:
            raise LLMResponseError("LLM response was empty or malformed.")
        return text

    def generate_response(
        self,
        user_message: str,
        system_prompt: str = "",
        max_tokens: Optional[int] = None,
        extra_body: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Generate a response using Gemini's API.

        Network errors, timeouts and non-success statuses are retried with
        exponential backoff. A successful call without text is not retried.

        Args:
            user_message: The message from the user
            system_prompt: System prompt placed in front of the message
            max_tokens: Maximum number of tokens to generate. If None, uses Config default
            extra_body: Additional request body fields, such as custom tools

        Returns:
            str: Generated response text

        Raises:
            LLMConfigurationError: If no API key is configured
            LLMResponseError: If the response holds no generated text
            requests.exceptions.RequestException: If every attempt failed
        """
        self.ensure_configured()

        prompt = f"{system_prompt}\n\n{user_message}" if system_prompt else user_message
        payload = self.build_payload(prompt, max_tokens, extra_body)

        response = retry_with_backoff(
            lambda: self._post(payload),
            max_attempts=self.max_attempts,
            base_delay=self.retry_base_delay,
            retry_on=(requests.exceptions.RequestException,),
            sleep=self._sleep,
            description="Gemini request",
        )

        try:
            data = response.json()
        except ValueError as e:
            raise LLMResponseError("LLM response was empty or malformed.") from e

        return self.extract_text(data)


class DeepseekLLMService(BaseLLMService):
    """Service for interacting with DeepSeek's API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        web_search_grounding: Optional[bool] = None,
        max_attempts: Optional[int] = None,
        retry_base_delay: Optional[float] = None,
        client: Optional[OpenAI] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the DeepSeek LLM service."""
        self.api_key = api_key if api_key is not None else Config.DEEPSEEK_API_KEY
        self.max_attempts = max_attempts or Config.LLM_MAX_ATTEMPTS
        self.retry_base_delay = (
            Config.LLM_RETRY_BASE_DELAY if retry_base_delay is None else retry_base_delay
        )
        self._sleep = sleep

        grounding = (
            Config.WEB_SEARCH_GROUNDING
            if web_search_grounding is None
            else web_search_grounding
        )
        if grounding:
            logger.warning("Web search grounding is not supported by DeepSeek, ignoring")

        self.client: Optional[OpenAI] = client
        if self.client is None and self.api_key:
            # Retries are handled by retry_with_backoff
            self.client = OpenAI(
                api_key=self.api_key,
                base_url=Config.DEEPSEEK_BASE_URL,
                timeout=Config.LLM_REQUEST_TIMEOUT,
                max_retries=0,
            )
        logger.info(
            f"Initialized DeepSeek LLM service with model: {Config.DEEPSEEK_MODEL_NAME}"
        )

    def ensure_configured(self) -> None:
        if self.client is None:
            raise LLMConfigurationError(
                "DEEPSEEK_API_KEY not set. Please check your .env file."
            )

    def generate_response(
        self,
        user_message: str,
        system_prompt: str = "",
        max_tokens: Optional[int] = None,
        extra_body: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Generate a response using DeepSeek's API.

        Args:
            user_message: The message from the user
            system_prompt: System prompt to use for the generation
            max_tokens: Maximum number of tokens to generate. If None, uses Config default
            extra_body: Additional parameters passed through to the API

        Returns:
            str: Generated response text

        Raises:
            LLMConfigurationError: If no API key is configured
            LLMResponseError: If the response holds no generated text
            openai.APIError: If every attempt failed
        """
        self.ensure_configured()
        assert self.client is not None

        from openai.types.chat import ChatCompletionMessageParam

        messages: List[ChatCompletionMessageParam] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_message})

        client = self.client
        response = retry_with_backoff(
            lambda: client.chat.completions.create(
                model=Config.DEEPSEEK_MODEL_NAME,
                messages=messages,
                max_tokens=max_tokens or Config.DEEPSEEK_MAX_TOKENS,
                temperature=Config.DEEPSEEK_TEMPERATURE,
                top_p=Config.DEEPSEEK_TOP_P,
                extra_body=extra_body,
            ),
            max_attempts=self.max_attempts,
            base_delay=self.retry_base_delay,
            retry_on=(APIConnectionError, APIStatusError),
            sleep=self._sleep,
            description="DeepSeek request",
        )

        if not response.choices or not response.choices[0].message.content:
            raise LLMResponseError("LLM response was empty or malformed.")

        return response.choices[0].message.content
