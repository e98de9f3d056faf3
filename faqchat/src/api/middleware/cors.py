"""Cross-origin policy for the API.

Only an explicit list of origins plus one pattern-matched family of preview
deployment origins may call the API. Requests from other origins are rejected
before they reach an endpoint. Requests without an Origin header, such as
server-to-server calls, are allowed.
"""

import logging
import re
from typing import Iterable, Optional, Pattern

from flask import Flask, request
from flask_cors import CORS

from faqchat.conf.config import Config
from faqchat.src.api.middleware.exceptions import ForbiddenError

logger = logging.getLogger(__name__)


def is_origin_allowed(
    origin: Optional[str],
    allowed_origins: Optional[Iterable[str]] = None,
    origin_pattern: Optional[Pattern[str]] = None,
) -> bool:
    """Check an Origin header value against the allow-list and pattern.

    Args:
        origin: Value of the request's Origin header, if any
        allowed_origins: Exact origins to allow, defaults to Config.CORS_ALLOWED_ORIGINS
        origin_pattern: Pattern for preview origins, defaults to Config.CORS_ORIGIN_PATTERN

    Returns:
        True if the request may proceed
    """
    if not origin:
        return True

    if allowed_origins is None:
        allowed_origins = Config.CORS_ALLOWED_ORIGINS
    if origin_pattern is None:
        origin_pattern = re.compile(Config.CORS_ORIGIN_PATTERN)

    return origin in allowed_origins or origin_pattern.match(origin) is not None


def register_cors(app: Flask) -> None:
    """Apply the cross-origin policy to the Flask application.

    Args:
        app: Flask application
    """
    allowed_origins = list(Config.CORS_ALLOWED_ORIGINS)
    origin_pattern = re.compile(Config.CORS_ORIGIN_PATTERN)

    @app.before_request
    def reject_disallowed_origin() -> None:
        origin = request.headers.get("Origin")
        if not is_origin_allowed(origin, allowed_origins, origin_pattern):
            logger.warning(f"CORS blocked origin: {origin}")
            raise ForbiddenError(message=f"Not allowed by CORS policy. Origin: {origin}")

    CORS(
        app,
        origins=[*allowed_origins, origin_pattern],
        methods=Config.CORS_METHODS,
        supports_credentials=True,
    )
