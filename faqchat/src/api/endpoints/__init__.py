"""API endpoints package.

This package contains endpoint definitions for the API.
"""

from flask import Flask

from faqchat.src.api.endpoints.chat import init_chat_routes
from faqchat.src.api.endpoints.retrieval import init_retrieval_routes
from faqchat.src.services import FaqStore, KeywordRetriever, QueryProcessingService


def register_endpoints(
    app: Flask,
    query_processing_service: QueryProcessingService,
    retriever: KeywordRetriever,
    store: FaqStore,
) -> None:
    """Register all API endpoints with the application.

    Args:
        app: Flask application
        query_processing_service: Service running the RAG pipeline
        retriever: Keyword retriever over the FAQ store
        store: FAQ store backing the retriever
    """
    app.register_blueprint(init_chat_routes(query_processing_service))
    app.register_blueprint(init_retrieval_routes(retriever, store))
