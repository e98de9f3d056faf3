"""Errors raised by the LLM services."""


class LLMError(RuntimeError):
    """Base class for LLM service failures."""


class LLMConfigurationError(LLMError):
    """The service is missing configuration it needs, such as an API key."""


class LLMResponseError(LLMError):
    """The provider answered successfully but without usable generated text."""
