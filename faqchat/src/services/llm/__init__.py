"""LLM service package."""

from .exceptions import LLMConfigurationError, LLMError, LLMResponseError
from .llm_service import BaseLLMService, DeepseekLLMService, GeminiLLMService
from .retry import backoff_delay, retry_with_backoff

__all__ = [
    "BaseLLMService",
    "GeminiLLMService",
    "DeepseekLLMService",
    "LLMError",
    "LLMConfigurationError",
    "LLMResponseError",
    "retry_with_backoff",
    "backoff_delay",
]
