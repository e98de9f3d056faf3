"""Helpers for turning downstream failures into error response details."""

from typing import Any

import requests


def describe_error(error: BaseException) -> Any:
    """Describe a downstream failure for the ``details`` field of an error response.

    Provider errors that carry a response body are described by that body,
    everything else by its message.

    Args:
        error: The exception raised while processing a request

    Returns:
        The provider's JSON error body, its raw text, or the error message
    """
    if isinstance(error, requests.HTTPError) and error.response is not None:
        try:
            return error.response.json()
        except ValueError:
            return error.response.text or str(error)

    # openai.APIStatusError keeps the parsed error body
    body = getattr(error, "body", None)
    if isinstance(body, (dict, list, str)) and body:
        return body

    return str(error)
