"""Unit tests for the FaqStore class."""

import unittest

from faqchat.src.data_classes import FaqEntry
from faqchat.src.services.store import FaqStore, create_sqlite_engine, get_engine
from faqchat.src.services.store.seed_data import SEED_FAQS
from faqchat.tests.src.helpers import make_memory_store


class TestFaqStoreInitialization(unittest.TestCase):
    """Test cases for schema creation and seeding."""

    def test_initialize_seeds_empty_table(self) -> None:
        """Test that the sample FAQs are inserted into a new database."""
        store = FaqStore(engine=create_sqlite_engine("sqlite://"))
        store.initialize()

        self.assertEqual(store.count(), len(SEED_FAQS))

    def test_initialize_twice_does_not_duplicate(self) -> None:
        """Test that restarting does not insert the sample FAQs again."""
        store = FaqStore(engine=create_sqlite_engine("sqlite://"))
        store.initialize()
        store.initialize()

        self.assertEqual(store.count(), len(SEED_FAQS))

    def test_initialize_without_seed(self) -> None:
        """Test that seeding can be skipped."""
        store = FaqStore(engine=create_sqlite_engine("sqlite://"))
        store.initialize(seed=False)

        self.assertEqual(store.count(), 0)

    def test_get_engine_is_cached_per_url(self) -> None:
        """Test that the same engine is returned for the same URL."""
        url = "sqlite://"
        self.assertIs(get_engine(url), get_engine(url))


class TestFaqStoreFindMatching(unittest.TestCase):
    """Test cases for substring search."""

    def setUp(self) -> None:
        """Set up a small store before each test method."""
        self.store = make_memory_store(
            [
                ("What are your hours of operation?", "We open at 9 AM."),
                ("How do I reset my password?", "Use the Forgot Password link."),
                ("What is the return policy?", "Refunds within 30 days."),
                ("Do you offer 100% refunds?", "Yes, for digital products."),
                ("Is shipping free?", "Shipping is free above $50."),
            ]
        )

    def test_matches_question_case_insensitively(self) -> None:
        """Test that upper-case text in the database matches lower-case terms."""
        results = self.store.find_matching(["password"], limit=3)

        self.assertEqual([entry.id for entry in results], [2])
        self.assertIsInstance(results[0], FaqEntry)
        self.assertEqual(results[0].question, "How do I reset my password?")

    def test_matches_answer(self) -> None:
        """Test that terms are also matched against the answer."""
        results = self.store.find_matching(["forgot"], limit=3)

        self.assertEqual([entry.id for entry in results], [2])

    def test_any_term_is_enough(self) -> None:
        """Test that terms are combined with OR."""
        results = self.store.find_matching(["refunds", "shipping"], limit=3)

        self.assertEqual([entry.id for entry in results], [3, 4, 5])

    def test_results_in_storage_order_and_limited(self) -> None:
        """Test that the first matches in storage order win."""
        results = self.store.find_matching(["?"], limit=3)

        self.assertEqual([entry.id for entry in results], [1, 2, 3])

    def test_percent_sign_matches_literally(self) -> None:
        """Test that LIKE wildcards in user text are escaped."""
        self.assertEqual(
            [entry.id for entry in self.store.find_matching(["100%"], limit=3)], [4]
        )
        self.assertEqual(self.store.find_matching(["zz%"], limit=3), [])
        self.assertEqual(self.store.find_matching(["%"], limit=3)[0].id, 4)

    def test_underscore_matches_literally(self) -> None:
        """Test that an underscore is not a single-character wildcard."""
        self.assertEqual(self.store.find_matching(["passw_rd"], limit=3), [])

    def test_quotes_do_not_break_query(self) -> None:
        """Test that SQL syntax in terms is treated as plain text."""
        results = self.store.find_matching(
            ["x' or '1'='1", "'; drop table faqs; --"], limit=3
        )

        self.assertEqual(results, [])
        self.assertEqual(self.store.count(), 5)

    def test_no_terms_returns_nothing(self) -> None:
        """Test that an empty term list does not match every row."""
        self.assertEqual(self.store.find_matching([], limit=3), [])

    def test_non_positive_limit_returns_nothing(self) -> None:
        """Test that a zero limit returns no rows."""
        self.assertEqual(self.store.find_matching(["password"], limit=0), [])


if __name__ == "__main__":
    unittest.main()
