"""Core API setup and configuration.

This module configures API middleware, error handling, and other global API components.
"""

import logging

from flask import Flask

from faqchat.src.api.endpoints import register_endpoints
from faqchat.src.api.middleware import register_middleware
from faqchat.src.services import FaqStore, KeywordRetriever, QueryProcessingService

logger = logging.getLogger(__name__)


def setup_api(
    app: Flask,
    query_processing_service: QueryProcessingService,
    retriever: KeywordRetriever,
    store: FaqStore,
) -> None:
    """Set up API with middleware and endpoints.

    Args:
        app: Flask application
        query_processing_service: Service running the RAG pipeline
        retriever: Keyword retriever over the FAQ store
        store: FAQ store backing the retriever
    """
    register_middleware(app)
    register_endpoints(app, query_processing_service, retriever, store)
