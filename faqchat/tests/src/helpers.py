"""Shared builders for the test suite."""

import json
from typing import Any, Iterable, Optional, Tuple

import requests

from faqchat.src.services.store import FaqStore, create_sqlite_engine


def make_memory_store(entries: Optional[Iterable[Tuple[str, str]]] = None) -> FaqStore:
    """Create an isolated in-memory FAQ store.

    Args:
        entries: Question/answer pairs to insert. The sample FAQs are used if None.
    """
    store = FaqStore(engine=create_sqlite_engine("sqlite://"))
    if entries is None:
        store.initialize(seed=True)
    else:
        store.initialize(seed=False)
        store.add_entries(entries)
    return store


def make_response(status_code: int, body: Any) -> requests.Response:
    """Build a requests.Response with a JSON (or raw bytes) body."""
    response = requests.Response()
    response.status_code = status_code
    response._content = body if isinstance(body, bytes) else json.dumps(body).encode()
    response.encoding = "utf-8"
    response.url = "https://generativelanguage.test/v1beta/models/test:generateContent"
    return response


def gemini_body(text: str) -> dict:
    """Build a generateContent response body holding ``text``."""
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}
