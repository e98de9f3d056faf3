"""Query processing service implementing the FAQ RAG pipeline.

This service orchestrates one chat request:
1. Checking that the LLM service can be called at all
2. Retrieving related FAQ entries by keyword
3. Building the augmented prompt from the retrieved context
4. Generating the answer with the LLM service
"""

import logging

from faqchat.src.data_classes import QueryResult
from faqchat.src.services.llm import BaseLLMService
from faqchat.src.services.query_processing.prompt_builder import (
    build_augmented_prompt,
)
from faqchat.src.services.retrieval import KeywordRetriever

logger = logging.getLogger(__name__)


class QueryProcessingService:
    """Runs retrieval, prompt augmentation and generation for a query.

    Attributes:
        llm_service: Service for language model interactions
        retriever: Keyword retriever over the FAQ store
    """

    def __init__(self, llm_service: BaseLLMService, retriever: KeywordRetriever) -> None:
        """Initialize the service with required components.

        Raises:
            AssertionError: If any required component is None
        """
        assert llm_service is not None, "LLM service is required"
        assert retriever is not None, "Retriever is required"

        self.llm_service = llm_service
        self.retriever = retriever
        logger.info("QueryProcessingService initialized")

    def process_query(self, query: str) -> QueryResult:
        """Answer a user query from the FAQ database.

        Args:
            query: The user's query to process

        Returns:
            QueryResult with the generated response and the retrieved entries

        Raises:
            ValueError: If the query is empty
            LLMConfigurationError: If the LLM service is not configured
            Exception: Any retrieval or generation failure, unchanged
        """
        if not query or not query.strip():
            raise ValueError("Query is required")

        # Fail before touching the database or the network
        self.llm_service.ensure_configured()

        retrieval = self.retriever.retrieve(query)
        context = retrieval.to_context()
        logger.info(f"[RAG] Retrieved Context:\n{context}")

        prompt = build_augmented_prompt(query, retrieval)
        response = self.llm_service.generate_response(user_message=prompt)
        logger.info(f"Generated response of {len(response)} characters")

        return QueryResult(query=query, response=response, retrieval=retrieval)
