"""FAQ storage backed by SQLAlchemy.

This module owns every interaction with the FAQ database:
- Schema creation and one-time seeding of the sample FAQs
- Substring search over questions and answers with bound parameters

The engine is a process-wide resource cached per database URL. It is created
lazily on first use and reused by every store pointing at the same URL.
"""

import logging
import threading
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from sqlalchemy import Engine, Integer, Text, create_engine, func, or_, select
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column
from sqlalchemy.pool import StaticPool

from faqchat.conf.config import Config
from faqchat.src.data_classes import FaqEntry
from faqchat.src.services.store.seed_data import SEED_FAQS

logger = logging.getLogger(__name__)

_ENGINE_LOCK = threading.Lock()
_engine_cache: Dict[str, Engine] = {}


class Base(DeclarativeBase):
    """Declarative base for the FAQ tables."""


class FaqRecord(Base):
    """ORM mapping of the ``faqs`` table."""

    __tablename__ = "faqs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)

    def to_entry(self) -> FaqEntry:
        return FaqEntry(id=self.id, question=self.question, answer=self.answer)


def create_sqlite_engine(database_url: str) -> Engine:
    """Create an engine that can be shared between request threads.

    Args:
        database_url: SQLAlchemy database URL

    Returns:
        A new SQLAlchemy engine
    """
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(database_url)

    if url.database in (None, "", ":memory:"):
        # In-memory databases exist per connection, so keep a single one
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(database_url, connect_args={"check_same_thread": False})


def get_engine(database_url: str) -> Engine:
    """Return the cached engine for ``database_url``, creating it on first use.

    Thread-safe via ``_ENGINE_LOCK``.
    """
    if database_url not in _engine_cache:
        with _ENGINE_LOCK:
            if database_url not in _engine_cache:
                logger.info(f"Opening database engine: {database_url}")
                _engine_cache[database_url] = create_sqlite_engine(database_url)
    return _engine_cache[database_url]


class FaqStore:
    """Read-mostly store of FAQ entries.

    Writes happen only in ``initialize``/``add_entries`` at startup. Request
    traffic only calls ``find_matching`` and ``count``.

    Attributes:
        engine (Engine): SQLAlchemy engine the store reads from
    """

    def __init__(
        self, database_url: Optional[str] = None, engine: Optional[Engine] = None
    ) -> None:
        """Initialize the store.

        Args:
            database_url: Database URL, defaults to ``Config.DATABASE_URL``
            engine: Explicit engine to use instead of the shared cached one
        """
        self.engine: Engine = engine or get_engine(database_url or Config.DATABASE_URL)

    def initialize(self, seed: bool = True) -> None:
        """Create the schema and insert the sample FAQs into an empty table.

        Args:
            seed: Whether to insert the sample FAQs when the table is empty
        """
        Base.metadata.create_all(self.engine)
        logger.info("FAQ schema ready")

        if not seed:
            return

        existing = self.count()
        if existing == 0:
            inserted = self.add_entries(SEED_FAQS)
            logger.info(f"Successfully inserted {inserted} sample FAQs.")
        else:
            logger.info(f"FAQs table already populated with {existing} entries.")

    def add_entries(self, entries: Iterable[Tuple[str, str]]) -> int:
        """Insert question/answer pairs.

        Args:
            entries: Iterable of (question, answer) tuples

        Returns:
            Number of rows inserted
        """
        records = [
            FaqRecord(question=question, answer=answer) for question, answer in entries
        ]
        with Session(self.engine) as session, session.begin():
            session.add_all(records)
        return len(records)

    def count(self) -> int:
        """Return the number of FAQ entries in the table."""
        with Session(self.engine) as session:
            return session.scalar(select(func.count()).select_from(FaqRecord)) or 0

    def find_matching(self, terms: Sequence[str], limit: int) -> List[FaqEntry]:
        """Find entries whose question or answer contains any of the terms.

        Every term is sent as a bound parameter with LIKE wildcards escaped, so
        user text can never change the shape of the query.

        Args:
            terms: Lower-cased substrings to look for
            limit: Maximum number of entries to return

        Returns:
            Matching entries in storage order
        """
        if not terms or limit <= 0:
            return []

        question = func.lower(FaqRecord.question, type_=Text)
        answer = func.lower(FaqRecord.answer, type_=Text)
        conditions = []
        for term in terms:
            conditions.append(question.contains(term, autoescape=True))
            conditions.append(answer.contains(term, autoescape=True))

        statement = (
            select(FaqRecord)
            .where(or_(*conditions))
            .order_by(FaqRecord.id)
            .limit(limit)
        )
        with Session(self.engine) as session:
            return [record.to_entry() for record in session.scalars(statement)]
