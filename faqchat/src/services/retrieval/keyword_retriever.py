"""Keyword retriever that matches FAQ entries by substring presence.

The query is lower-cased and split on whitespace. Tokens longer than two
characters, plus the whole query as one phrase, become search terms. An entry
matches when any term occurs in its question or answer.
"""

import logging
from typing import List, Optional

from faqchat.conf.config import Config
from faqchat.src.data_classes import MAX_RETRIEVED_ENTRIES, RetrievalResult
from faqchat.src.services.store import FaqStore

logger = logging.getLogger(__name__)


def extract_search_terms(
    query: str, min_keyword_length: int = Config.MIN_KEYWORD_LENGTH
) -> List[str]:
    """Build the lower-cased search terms for a query.

    Args:
        query: Raw user query
        min_keyword_length: Minimum length a token needs to be kept

    Returns:
        Unique terms in query order, with the whole phrase last
    """
    query_lower = query.lower().strip()
    if not query_lower:
        return []

    keywords = [word for word in query_lower.split() if len(word) >= min_keyword_length]

    terms: List[str] = []
    for term in keywords + [query_lower]:
        if term not in terms:
            terms.append(term)
    return terms


class KeywordRetriever:
    """Retrieves at most ``limit`` FAQ entries for a free-text query.

    Attributes:
        store (FaqStore): Store the entries are read from
        limit (int): Maximum number of entries per result
    """

    def __init__(self, store: FaqStore, limit: Optional[int] = None) -> None:
        limit = Config.RETRIEVAL_LIMIT if limit is None else limit
        if not 0 < limit <= MAX_RETRIEVED_ENTRIES:
            raise ValueError(
                f"Retrieval limit must be between 1 and {MAX_RETRIEVED_ENTRIES}, got {limit}"
            )
        self.store = store
        self.limit = limit

    def retrieve(self, query: str) -> RetrievalResult:
        """Find the FAQ entries related to a query.

        Args:
            query: Non-empty user query

        Returns:
            RetrievalResult with up to ``limit`` entries in storage order

        Raises:
            ValueError: If the query is empty
        """
        if not query or not query.strip():
            raise ValueError("Query is required")

        terms = extract_search_terms(query)
        entries = self.store.find_matching(terms, self.limit)
        logger.info(f"Retrieved {len(entries)} FAQ entries for {len(terms)} search terms")

        return RetrievalResult(query=query, entries=entries, terms=terms)
