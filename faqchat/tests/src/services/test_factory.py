"""Unit tests for the service factory functions."""

import unittest
from unittest.mock import patch

from faqchat.conf.config import Config
from faqchat.src.services import (
    DeepseekLLMService,
    GeminiLLMService,
    KeywordRetriever,
    create_faq_store,
    create_llm_service,
    create_query_processing_service,
    create_retriever,
)
from faqchat.src.services.store.seed_data import SEED_FAQS
from faqchat.tests.src.helpers import make_memory_store


class TestFactory(unittest.TestCase):
    """Test cases for service creation."""

    def test_create_llm_service_by_name(self) -> None:
        """Test that both providers can be selected without API keys."""
        with patch.object(Config, "GEMINI_API_KEY", None), patch.object(
            Config, "DEEPSEEK_API_KEY", None
        ):
            self.assertIsInstance(create_llm_service("gemini"), GeminiLLMService)
            self.assertIsInstance(create_llm_service("deepseek"), DeepseekLLMService)

    def test_create_llm_service_from_config(self) -> None:
        """Test that Config.LLM_SERVICE is used by default."""
        with patch.object(Config, "LLM_SERVICE", "deepseek"), patch.object(
            Config, "DEEPSEEK_API_KEY", None
        ):
            self.assertIsInstance(create_llm_service(), DeepseekLLMService)

    def test_create_llm_service_unknown(self) -> None:
        """Test that unknown providers are rejected."""
        with self.assertRaises(ValueError):
            create_llm_service("local")

    def test_create_faq_store_seeds(self) -> None:
        """Test that a new database is created with the sample FAQs."""
        store = create_faq_store("sqlite:///:memory:")

        self.assertEqual(store.count(), len(SEED_FAQS))

    def test_create_retriever_uses_config_limit(self) -> None:
        """Test that the retriever takes its limit from Config."""
        retriever = create_retriever(make_memory_store())

        self.assertIsInstance(retriever, KeywordRetriever)
        self.assertEqual(retriever.limit, Config.RETRIEVAL_LIMIT)

    def test_create_query_processing_service(self) -> None:
        """Test wiring with explicit components."""
        with patch.object(Config, "GEMINI_API_KEY", None):
            llm_service = GeminiLLMService()
        retriever = create_retriever(make_memory_store())

        service = create_query_processing_service(llm_service, retriever)

        self.assertIs(service.llm_service, llm_service)
        self.assertIs(service.retriever, retriever)


if __name__ == "__main__":
    unittest.main()
