"""Unit tests for the configuration module."""

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from faqchat.conf.config import Config, default_database_path


class TestDatabasePath(unittest.TestCase):
    """Test cases for locating the SQLite file."""

    def test_default_is_under_working_directory(self) -> None:
        """Test that the default file lives below the directory the server runs in."""
        previous_cwd = os.getcwd()
        with tempfile.TemporaryDirectory() as workdir, patch.dict(os.environ):
            os.environ.pop("DATABASE_PATH", None)
            os.chdir(workdir)
            try:
                path = default_database_path(Path("data"))
            finally:
                os.chdir(previous_cwd)

            self.assertEqual(path, Path(workdir).resolve() / "data" / "faqs.db")

    def test_environment_override(self) -> None:
        """Test that DATABASE_PATH takes precedence."""
        with tempfile.TemporaryDirectory() as workdir:
            target = Path(workdir).resolve() / "faq.sqlite"
            with patch.dict(os.environ, {"DATABASE_PATH": str(target)}):
                self.assertEqual(default_database_path(Path("data")), target)

    def test_database_path_is_absolute(self) -> None:
        """Test that the configured file path is absolute and independent of the source tree."""
        self.assertTrue(Config.DATABASE_PATH.is_absolute())
        self.assertFalse(hasattr(Config, "BASE_DIR"))


class TestConfig(unittest.TestCase):
    """Test cases for the Config class."""

    def test_cannot_instantiate(self) -> None:
        with self.assertRaises(TypeError):
            Config()

    def test_llm_service_is_valid(self) -> None:
        self.assertIn(Config.LLM_SERVICE, Config.VALID_LLM_SERVICES)


if __name__ == "__main__":
    unittest.main()
