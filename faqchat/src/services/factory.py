"""Factories that wire the FAQ store, retriever and LLM provider together.

Both the Flask app and the tests build their services through these
functions, so defaults from Config are applied in one place.
"""

import logging
from typing import Optional

from faqchat.conf.config import Config
from faqchat.src.services.llm import (
    BaseLLMService,
    DeepseekLLMService,
    GeminiLLMService,
)
from faqchat.src.services.query_processing import QueryProcessingService
from faqchat.src.services.retrieval import KeywordRetriever
from faqchat.src.services.store import FaqStore

logger = logging.getLogger(__name__)


def create_faq_store(database_url: Optional[str] = None, seed: bool = True) -> FaqStore:
    """Create the FAQ store and make sure its schema and sample data exist.

    Args:
        database_url: Database URL, defaults to Config.DATABASE_URL
        seed: Whether to insert the sample FAQs into an empty table

    Returns:
        Initialized FaqStore instance
    """
    store = FaqStore(database_url=database_url)
    store.initialize(seed=seed)
    logger.info(f"FAQ store ready with {store.count()} entries")
    return store


def create_retriever(store: FaqStore) -> KeywordRetriever:
    """Create a keyword retriever over the given store."""
    return KeywordRetriever(store=store, limit=Config.RETRIEVAL_LIMIT)


def create_llm_service(name: Optional[str] = None) -> BaseLLMService:
    """Create the LLM provider client named by ``name`` or Config.LLM_SERVICE.

    Raises:
        ValueError: If the provider name is unknown
    """
    name = name or Config.LLM_SERVICE
    providers = {"gemini": GeminiLLMService, "deepseek": DeepseekLLMService}
    if name not in providers:
        raise ValueError(
            f"Unsupported LLM service: {name}. Must be one of {sorted(providers)}"
        )

    logger.info(f"Creating {name} LLM service")
    return providers[name]()


def create_query_processing_service(
    llm_service: Optional[BaseLLMService] = None,
    retriever: Optional[KeywordRetriever] = None,
) -> QueryProcessingService:
    """Create and configure a QueryProcessingService instance.

    Args:
        llm_service: LLM service for language model interactions
        retriever: Keyword retriever over the FAQ store

    Returns:
        Configured QueryProcessingService instance
    """
    if llm_service is None:
        logger.info("No LLM service provided, creating new one")
        llm_service = create_llm_service()

    if retriever is None:
        logger.info("No retriever provided, creating new one")
        retriever = create_retriever(create_faq_store())

    return QueryProcessingService(llm_service=llm_service, retriever=retriever)
