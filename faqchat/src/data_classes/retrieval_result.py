"""Retrieval result data class produced by the keyword retriever."""

from dataclasses import dataclass, field
from typing import List

from faqchat.conf.prompts import (
    FAQ_DOCUMENT_SEPARATOR,
    FAQ_DOCUMENT_TEMPLATE,
    NO_DOCUMENTS_FOUND,
)
from faqchat.src.data_classes.faq_entry import FaqEntry

MAX_RETRIEVED_ENTRIES = 3


@dataclass
class RetrievalResult:
    """FAQ entries matched for one query, in database storage order.

    Attributes:
        query: The user query the entries were retrieved for
        entries: Matched FAQ entries, at most MAX_RETRIEVED_ENTRIES
        terms: Lower-cased search terms that were matched against the database
    """

    query: str
    entries: List[FaqEntry] = field(default_factory=list)
    terms: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.entries) > MAX_RETRIEVED_ENTRIES:
            raise ValueError(
                f"Retrieval result holds {len(self.entries)} entries, "
                f"maximum is {MAX_RETRIEVED_ENTRIES}"
            )

    @property
    def has_matches(self) -> bool:
        return bool(self.entries)

    def to_context(self) -> str:
        """Render the entries as the context block of a prompt.

        Returns:
            The numbered FAQ documents joined by a separator, or the explicit
            no-match marker when nothing was found.
        """
        if not self.entries:
            return NO_DOCUMENTS_FOUND

        return FAQ_DOCUMENT_SEPARATOR.join(
            FAQ_DOCUMENT_TEMPLATE.format(
                index=index, question=entry.question, answer=entry.answer
            )
            for index, entry in enumerate(self.entries, start=1)
        )
