"""Storage services package.

This package provides the FAQ database:
- FaqStore: SQLAlchemy-backed store of question/answer pairs
- get_engine: Process-wide engine cache shared by all stores
"""

from .faq_store import FaqRecord, FaqStore, create_sqlite_engine, get_engine

__all__ = ["FaqStore", "FaqRecord", "create_sqlite_engine", "get_engine"]
