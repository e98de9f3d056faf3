"""Flask application for the retrieval-augmented FAQ chat assistant."""

import argparse
import logging
import sys
from typing import Optional

from flask import Flask

from faqchat.conf.config import Config
from faqchat.src.api import setup_api
from faqchat.src.services import (
    BaseLLMService,
    FaqStore,
    create_faq_store,
    create_llm_service,
    create_query_processing_service,
    create_retriever,
)

# Logging is configured in faqchat/__init__.py
logger = logging.getLogger(__name__)


def create_app(
    llm_service: Optional[BaseLLMService] = None,
    faq_store: Optional[FaqStore] = None,
) -> Flask:
    """Create and configure the Flask application with the FAQ store and LLM service."""
    logger.info("Starting application setup...")

    app = Flask(__name__)

    if llm_service is None:
        llm_service = create_llm_service()

    if faq_store is None:
        faq_store = create_faq_store()

    retriever = create_retriever(faq_store)
    query_processing_service = create_query_processing_service(llm_service, retriever)

    logger.info("Setting up API routes")
    setup_api(app, query_processing_service, retriever, faq_store)
    logger.info("Application setup complete")
    return app


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Run the FAQ chat backend (--llm, --port, --database-url, --no-grounding)"
    )
    parser.add_argument(
        "--llm",
        type=str,
        choices=Config.VALID_LLM_SERVICES,
        default=Config.LLM_SERVICE,
        help=f"LLM service to use (default: {Config.LLM_SERVICE})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=Config.FLASK_PORT,
        help=f"Port for the API server (default: {Config.FLASK_PORT})",
    )
    parser.add_argument(
        "--database-url",
        type=str,
        default=Config.DATABASE_URL,
        help="SQLAlchemy URL of the FAQ database",
    )
    parser.add_argument(
        "--no-grounding",
        action="store_true",
        help="Do not let the model consult web search results",
    )

    args = parser.parse_args(argv)

    Config.LLM_SERVICE = args.llm
    Config.FLASK_PORT = args.port
    Config.DATABASE_URL = args.database_url
    if args.no_grounding:
        Config.WEB_SEARCH_GROUNDING = False

    logger.info(f"Using LLM service: {Config.LLM_SERVICE}")
    logger.info(f"Web search grounding enabled: {Config.WEB_SEARCH_GROUNDING}")

    try:
        app = create_app()
    except Exception as e:
        logger.error(f"Failed to initialize application: {str(e)}")
        sys.exit(1)

    logger.info(f"Server is running on http://localhost:{Config.FLASK_PORT}")
    app.run(host=Config.FLASK_HOST, port=Config.FLASK_PORT, threaded=True)


if __name__ == "__main__":
    main()
