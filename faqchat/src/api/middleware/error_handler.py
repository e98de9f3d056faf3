"""Error handlers that turn every failure into a JSON error response.

Order of precedence follows Flask's lookup: the 404 handler, then the most
specific exception class registered below.
"""

import logging
import traceback
from typing import Tuple

from flask import Flask, Response, current_app, request
from flask_pydantic.exceptions import ValidationError as RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from werkzeug.exceptions import HTTPException

from faqchat.src.api.middleware.exceptions import (
    APIError,
    NotFoundError,
    error_response,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    """Register error handlers with the Flask application.

    Args:
        app: Flask application
    """
    # flask-pydantic raises instead of answering with its own body format
    app.config["FLASK_PYDANTIC_VALIDATION_ERROR_RAISE"] = True

    @app.errorhandler(RequestValidationError)
    def handle_request_validation_error(error: RequestValidationError) -> Tuple[Response, int]:  # type: ignore
        """Report fields rejected by the ``@validate()`` request models.

        Args:
            error: Error carrying the failed body, form, path and query fields

        Returns:
            400 response listing the failed fields
        """
        failed = [
            str(field_error)
            for params in (
                error.body_params,
                error.form_params,
                error.path_params,
                error.query_params,
            )
            for field_error in (params or [])
        ]
        logger.warning(f"Rejected request to {request.path}: {failed}")
        return error_response("Validation error", 400, "\n".join(failed) or None)

    @app.errorhandler(PydanticValidationError)
    def handle_pydantic_validation_error(error: PydanticValidationError) -> Tuple[Response, int]:  # type: ignore
        logger.warning(f"Validation error: {error}")
        return error_response(
            "Validation error", 400, "\n".join(str(e) for e in error.errors())
        )

    @app.errorhandler(APIError)
    def handle_api_error(error: APIError) -> Tuple[Response, int]:  # type: ignore
        """Render an APIError with its own status code.

        Server-side errors are logged as errors, client errors as warnings.
        """
        log = logger.error if error.status_code >= 500 else logger.warning
        log(f"{error.__class__.__name__} ({error.status_code}): {error.message}")
        if error.details:
            log(f"Error details: {error.details}")

        return error.to_response()

    @app.errorhandler(404)
    def handle_not_found(error: HTTPException) -> Tuple[Response, int]:  # type: ignore
        return handle_api_error(NotFoundError(details=request.path))

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException) -> Tuple[Response, int]:  # type: ignore
        """Keep the status of werkzeug errors such as 405, as JSON."""
        status_code = error.code or 500
        logger.warning(f"HTTP error {status_code} for {request.path}: {error.description}")
        return error_response(error.name, status_code, error.description)

    @app.errorhandler(Exception)
    def handle_exception(error: Exception) -> Tuple[Response, int]:  # type: ignore
        """Last resort for exceptions no route converted to an APIError.

        Args:
            error: Exception that was raised

        Returns:
            500 response, with the message as details only in debug mode
        """
        logger.error(f"Unhandled exception: {str(error)}")
        logger.error(traceback.format_exc())

        details = str(error) if current_app.debug else None
        return error_response("Internal server error", 500, details)
