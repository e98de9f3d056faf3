"""Unit tests for the RetrievalResult data class."""

import unittest

from faqchat.conf.prompts import NO_DOCUMENTS_FOUND
from faqchat.src.data_classes import MAX_RETRIEVED_ENTRIES, FaqEntry, RetrievalResult


class TestRetrievalResult(unittest.TestCase):
    """Test cases for context rendering and the size invariant."""

    def setUp(self) -> None:
        """Set up test entries before each test method."""
        self.entries = [
            FaqEntry(id=1, question="Q one?", answer="A one."),
            FaqEntry(id=2, question="Q two?", answer="A two."),
        ]

    def test_to_context_formats_numbered_documents(self) -> None:
        """Test the document format and separator."""
        result = RetrievalResult(query="q", entries=self.entries)

        self.assertEqual(
            result.to_context(),
            "FAQ Document 1:\nQ: Q one?\nA: A one.\n---\nFAQ Document 2:\nQ: Q two?\nA: A two.",
        )

    def test_empty_result_renders_marker(self) -> None:
        """Test that no entries render as the explicit marker, never as ''."""
        result = RetrievalResult(query="q")

        self.assertFalse(result.has_matches)
        self.assertEqual(result.to_context(), NO_DOCUMENTS_FOUND)

    def test_more_than_maximum_entries_rejected(self) -> None:
        """Test the size invariant."""
        entries = [
            FaqEntry(id=i, question=f"Q{i}", answer=f"A{i}")
            for i in range(MAX_RETRIEVED_ENTRIES + 1)
        ]

        with self.assertRaises(ValueError):
            RetrievalResult(query="q", entries=entries)

    def test_entry_to_dict(self) -> None:
        """Test JSON conversion of an entry."""
        self.assertEqual(
            self.entries[0].to_dict(), {"id": 1, "question": "Q one?", "answer": "A one."}
        )


if __name__ == "__main__":
    unittest.main()
