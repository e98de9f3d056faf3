"""Unit tests for prompt augmentation."""

import unittest

from faqchat.conf.prompts import NO_DOCUMENTS_FOUND, RAG_SYSTEM_PROMPT
from faqchat.src.data_classes import FaqEntry, RetrievalResult
from faqchat.src.services.query_processing import build_augmented_prompt


class TestBuildAugmentedPrompt(unittest.TestCase):
    """Test cases for build_augmented_prompt."""

    def test_prompt_contains_instruction_context_and_query(self) -> None:
        """Test that all three slots are filled in order."""
        retrieval = RetrievalResult(
            query="When are you open?",
            entries=[FaqEntry(id=1, question="Hours?", answer="9 to 5.")],
        )

        prompt = build_augmented_prompt("When are you open?", retrieval)

        self.assertTrue(prompt.startswith(RAG_SYSTEM_PROMPT))
        self.assertIn("CONTEXT:\n---\nFAQ Document 1:\nQ: Hours?\nA: 9 to 5.\n---", prompt)
        self.assertTrue(prompt.endswith("CUSTOMER QUERY: When are you open?"))
        self.assertLess(prompt.index("FAQ Document 1"), prompt.index("CUSTOMER QUERY"))

    def test_no_match_marker_in_context(self) -> None:
        """Test that the model is told explicitly that nothing was found."""
        prompt = build_augmented_prompt("Anything?", RetrievalResult(query="Anything?"))

        self.assertIn(f"---\n{NO_DOCUMENTS_FOUND}\n---", prompt)

    def test_query_kept_verbatim_apart_from_whitespace(self) -> None:
        """Test that the query case and punctuation are not altered."""
        prompt = build_augmented_prompt(
            "  Can I MODIFY my order?!  ", RetrievalResult(query="x")
        )

        self.assertTrue(prompt.endswith("CUSTOMER QUERY: Can I MODIFY my order?!"))

    def test_prompt_is_deterministic(self) -> None:
        """Test that the same input builds the same prompt."""
        retrieval = RetrievalResult(query="q")
        self.assertEqual(
            build_augmented_prompt("q", retrieval), build_augmented_prompt("q", retrieval)
        )


if __name__ == "__main__":
    unittest.main()
