"""Services package for backend functionality.

This package contains all service components for business logic.
"""

from .factory import (
    create_faq_store,
    create_llm_service,
    create_query_processing_service,
    create_retriever,
)
from .llm import BaseLLMService, DeepseekLLMService, GeminiLLMService
from .query_processing import QueryProcessingService
from .retrieval import KeywordRetriever
from .store import FaqStore

__all__ = [
    # LLM Services
    "BaseLLMService",
    "GeminiLLMService",
    "DeepseekLLMService",
    # Other Services
    "FaqStore",
    "KeywordRetriever",
    "QueryProcessingService",
    # Factory Functions
    "create_faq_store",
    "create_retriever",
    "create_llm_service",
    "create_query_processing_service",
]
