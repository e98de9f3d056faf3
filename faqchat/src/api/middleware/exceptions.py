"""API error types and the JSON error body they are rendered as.

Every error leaving the API has the shape ``{error, details?, status_code}``.
"""

from typing import Any, Dict, List, Optional, Tuple, Union

from flask import Response, jsonify
from pydantic import BaseModel, Field

# Plain message, provider error body, or a list of field errors
ErrorDetails = Union[str, Dict[str, Any], List[Dict[str, Any]]]


class ErrorResponseModel(BaseModel):
    """JSON body of an error response."""

    error: str = Field(..., description="Human readable error message")
    details: Optional[ErrorDetails] = Field(
        None, description="Underlying cause, omitted when there is none"
    )
    status_code: int = Field(500, description="HTTP status code of the response")


def error_response(
    error: str, status_code: int, details: Optional[ErrorDetails] = None
) -> Tuple[Response, int]:
    """Render an error body and pair it with its status code.

    Args:
        error: Message for the ``error`` field
        status_code: HTTP status of the response
        details: Optional cause, left out of the body when None

    Returns:
        Flask response tuple
    """
    body = ErrorResponseModel(error=error, details=details, status_code=status_code)
    return jsonify(body.model_dump(exclude_none=True)), status_code


class APIError(Exception):
    """Base class for errors that map onto a specific HTTP status.

    Subclasses set ``status_code`` and ``default_message``. Raising one from a
    route or a request hook produces the matching JSON error response.
    """

    status_code = 500
    default_message = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[ErrorDetails] = None,
    ):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> Tuple[Response, int]:
        return error_response(self.message, self.status_code, self.details)


class ValidationError(APIError):
    """The request body is missing data or holds invalid data."""

    status_code = 400
    default_message = "Invalid request data"


class ForbiddenError(APIError):
    """The request is refused, e.g. because of its origin."""

    status_code = 403
    default_message = "Forbidden"


class NotFoundError(APIError):
    """No route matches the requested path."""

    status_code = 404
    default_message = "Resource not found"


class ConfigurationError(APIError):
    """The server lacks configuration it needs, such as an API key."""

    status_code = 500
    default_message = "Server configuration error"


class ServiceError(APIError):
    """A downstream component (store or LLM provider) failed."""

    status_code = 500
    default_message = "Service error"
