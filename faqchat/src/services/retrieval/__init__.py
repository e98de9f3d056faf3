"""Retrieval package for FAQ keyword search.

The main interface is the KeywordRetriever class, which turns a user query
into search terms and reads the matching entries from the FAQ store.
"""

from .keyword_retriever import KeywordRetriever, extract_search_terms

__all__ = [
    "KeywordRetriever",
    "extract_search_terms",
]
