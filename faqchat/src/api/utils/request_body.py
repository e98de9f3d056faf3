"""Body error handling for routes that take a ``{userQuery}`` JSON object."""

import logging
from typing import Tuple

from flask import Blueprint, Response, request
from flask_pydantic.exceptions import JsonBodyParsingError
from werkzeug.exceptions import BadRequest, UnsupportedMediaType

from faqchat.src.api.middleware.exceptions import ValidationError

logger = logging.getLogger(__name__)

QUERY_REQUIRED = "Query is required"


def register_query_body_errors(blueprint: Blueprint) -> None:
    """Answer unusable request bodies on ``blueprint`` with 400 "Query is required".

    Covers a missing body, a non-JSON content type, unparseable JSON, and
    JSON that is not an object (``null``, arrays, scalars). None of these can
    carry a query, so they get the same answer as an empty one.

    Args:
        blueprint: Blueprint whose routes validate a query body
    """

    @blueprint.errorhandler(JsonBodyParsingError)
    @blueprint.errorhandler(UnsupportedMediaType)
    @blueprint.errorhandler(BadRequest)
    def handle_unusable_body(error: Exception) -> Tuple[Response, int]:
        logger.warning(
            f"Unusable body for {request.path} "
            f"({request.content_type or 'no content type'}): {error.__class__.__name__}"
        )
        return ValidationError(message=QUERY_REQUIRED).to_response()
