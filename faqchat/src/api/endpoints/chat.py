"""Chat endpoints module.

This module provides the Flask route that answers user questions from the
FAQ database with retrieval augmented generation.
"""

import logging
import traceback
from typing import Optional

from flask import Blueprint, Response, jsonify
from flask_pydantic import validate  # type: ignore
from pydantic import BaseModel, ConfigDict, Field

from faqchat.src.api.middleware.exceptions import (
    ConfigurationError,
    ServiceError,
    ValidationError,
)
from faqchat.src.api.utils.error_details import describe_error
from faqchat.src.api.utils.request_body import (
    QUERY_REQUIRED,
    register_query_body_errors,
)
from faqchat.src.services import QueryProcessingService
from faqchat.src.services.llm import LLMConfigurationError

logger = logging.getLogger(__name__)


# Schema definitions
class ChatRequest(BaseModel):
    """Chat request model for validation."""

    model_config = ConfigDict(populate_by_name=True)

    user_query: Optional[str] = Field(
        None, alias="userQuery", description="User's question"
    )


class ChatResponseModel(BaseModel):
    """Chat response model."""

    text: str = Field(..., description="Generated response text")


def init_chat_routes(query_processing_service: QueryProcessingService) -> Blueprint:
    """Initialize chat routes with the provided services.

    Args:
        query_processing_service: Service running the RAG pipeline.

    Returns:
        Blueprint: Flask blueprint with configured chat routes.
    """
    chat_bp = Blueprint("chat", __name__)
    register_query_body_errors(chat_bp)

    @chat_bp.route("/api/chat", methods=["POST"])
    @validate()
    def chat(body: ChatRequest) -> tuple[Response, int]:  # type: ignore
        """Answer a user question from the FAQ database.

        Args:
            body: Validated request body

        Returns:
            Response with the generated text
        """
        user_query = body.user_query or ""
        if not user_query.strip():
            raise ValidationError(message=QUERY_REQUIRED)

        try:
            query_result = query_processing_service.process_query(user_query)
        except LLMConfigurationError as e:
            raise ConfigurationError(message=str(e))
        except Exception as e:
            logger.error(f"Error during RAG process: {str(e)}")
            logger.error(traceback.format_exc())
            raise ServiceError(
                message="Failed to generate response. Check API key, server logs, or network connection.",
                details=describe_error(e),
            )

        response = ChatResponseModel(text=query_result.response)
        return jsonify(response.model_dump()), 200

    return chat_bp
