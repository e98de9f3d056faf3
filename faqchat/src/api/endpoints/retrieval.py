"""Retrieval endpoints module.

This module provides Flask routes for retrieval operations without LLM processing.
"""

import logging
import traceback
from typing import Any, Dict, List, Optional

from flask import Blueprint, Response, jsonify
from flask_pydantic import validate  # type: ignore
from pydantic import BaseModel, ConfigDict, Field

from faqchat.src.api.middleware.exceptions import ServiceError, ValidationError
from faqchat.src.api.utils.request_body import (
    QUERY_REQUIRED,
    register_query_body_errors,
)
from faqchat.src.services import FaqStore, KeywordRetriever

logger = logging.getLogger(__name__)


# Schema definitions
class RetrievalRequest(BaseModel):
    """Retrieval request model for validation."""

    model_config = ConfigDict(populate_by_name=True)

    user_query: Optional[str] = Field(
        None, alias="userQuery", description="User's query for retrieval"
    )


class RetrievalResponseModel(BaseModel):
    """Retrieval response model."""

    documents: List[Dict[str, Any]] = Field(
        default_factory=list, description="Matched FAQ entries"
    )
    context: str = Field(..., description="Context block as it would appear in a prompt")
    matched: bool = Field(..., description="Whether any FAQ entry matched")


class HealthResponseModel(BaseModel):
    """Health check response model."""

    status: str = Field("ok", description="Service status")
    faq_count: int = Field(..., description="Number of FAQ entries in the database")


def init_retrieval_routes(retriever: KeywordRetriever, store: FaqStore) -> Blueprint:
    """Initialize retrieval routes with the provided services.

    Args:
        retriever: Keyword retriever over the FAQ store.
        store: FAQ store, used for the health check.

    Returns:
        Blueprint: Flask blueprint with configured retrieval routes.
    """
    retrieval_bp = Blueprint("retrieval", __name__)
    register_query_body_errors(retrieval_bp)

    @retrieval_bp.route("/api/retrieve", methods=["POST"])
    @validate()
    def retrieve(body: RetrievalRequest) -> tuple[Response, int]:  # type: ignore
        """Return the FAQ entries a chat request would be grounded on.

        Args:
            body: Validated request body

        Returns:
            Response with the matched entries and the rendered context
        """
        user_query = body.user_query or ""
        if not user_query.strip():
            raise ValidationError(message=QUERY_REQUIRED)

        try:
            result = retriever.retrieve(user_query)
        except Exception as e:
            logger.error(f"Failed to retrieve FAQ entries: {str(e)}")
            logger.error(traceback.format_exc())
            raise ServiceError(message="Failed to retrieve FAQ entries", details=str(e))

        response = RetrievalResponseModel(
            documents=[entry.to_dict() for entry in result.entries],
            context=result.to_context(),
            matched=result.has_matches,
        )
        return jsonify(response.model_dump()), 200

    @retrieval_bp.route("/api/health", methods=["GET"])
    def health() -> tuple[Response, int]:
        """Report service status and the size of the FAQ corpus."""
        try:
            faq_count = store.count()
        except Exception as e:
            logger.error(f"Health check failed: {str(e)}")
            raise ServiceError(message="FAQ database unavailable", details=str(e))

        return jsonify(HealthResponseModel(faq_count=faq_count).model_dump()), 200

    return retrieval_bp
