"""Configuration module for the FAQ chat backend."""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _env_list(name: str, default: List[str]) -> List[str]:
    """Read a comma separated list from the environment."""
    raw = os.getenv(name)
    if not raw:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def default_database_path(data_dir: Path) -> Path:
    """Resolve the SQLite file from DATABASE_PATH or ``data_dir/faqs.db``.

    Relative paths are resolved against the current working directory.
    """
    return Path(os.getenv("DATABASE_PATH", str(data_dir / "faqs.db"))).resolve()


class ConfigMeta(type):
    """Metaclass to prevent direct instantiation and enforce singleton attributes."""

    def __call__(cls, *args: object, **kwargs: object) -> None:
        """Prevent direct instantiation."""
        raise TypeError("Config cannot be instantiated directly. Use class attributes.")


class Config(metaclass=ConfigMeta):
    """Singleton configuration class. Access attributes directly via the class."""

    # =========================================================================
    # Path Configuration
    # =========================================================================
    # Relative to the directory the server is started from, not the install location
    DATA_DIR: Path = Path(os.getenv("FAQCHAT_DATA_DIR", "data"))
    DATABASE_PATH: Path = default_database_path(DATA_DIR)
    DATABASE_URL: str = os.getenv("DATABASE_URL", f"sqlite:///{DATABASE_PATH}")

    # =========================================================================
    # Server Configuration
    # =========================================================================
    FLASK_HOST: str = os.getenv("HOST", "0.0.0.0")
    FLASK_PORT: int = int(os.getenv("PORT", "5000"))

    # =========================================================================
    # CORS Configuration
    # =========================================================================
    CORS_ALLOWED_ORIGINS: List[str] = _env_list(
        "CORS_ALLOWED_ORIGINS",
        ["http://localhost:5173", "https://cimba.vercel.app"],
    )
    # Preview deployments get a unique subdomain per push
    CORS_ORIGIN_PATTERN: str = os.getenv(
        "CORS_ORIGIN_PATTERN", r"^https://cimba-.*\.vercel\.app$"
    )
    CORS_METHODS: List[str] = ["GET", "POST"]

    # =========================================================================
    # Retrieval Configuration
    # =========================================================================
    RETRIEVAL_LIMIT: int = 3  # Maximum FAQ entries placed in a prompt
    MIN_KEYWORD_LENGTH: int = 3  # Shorter tokens are dropped from the query

    # =========================================================================
    # LLM Configuration
    # =========================================================================
    # Service selection
    LLM_SERVICE: str = os.getenv("LLM_SERVICE", "gemini")  # Options: gemini, deepseek
    VALID_LLM_SERVICES: List[str] = ["gemini", "deepseek"]

    # Retry policy shared by all providers
    LLM_MAX_ATTEMPTS: int = int(os.getenv("LLM_MAX_ATTEMPTS", "3"))
    LLM_RETRY_BASE_DELAY: float = float(os.getenv("LLM_RETRY_BASE_DELAY", "1.0"))
    LLM_REQUEST_TIMEOUT: float = float(os.getenv("LLM_REQUEST_TIMEOUT", "10"))

    # Gemini configuration
    GEMINI_API_URL: str = "https://generativelanguage.googleapis.com/v1beta/models"
    GEMINI_MODEL_NAME: str = os.getenv("GEMINI_MODEL_NAME", "gemini-2.5-flash")
    GEMINI_TEMPERATURE: float = 0.0
    GEMINI_TOP_P: float = 1.0
    GEMINI_MAX_TOKENS: int = 2048
    GEMINI_API_KEY: Optional[str] = os.getenv("GEMINI_API_KEY")
    WEB_SEARCH_GROUNDING: bool = _env_bool("WEB_SEARCH_GROUNDING", True)

    # DeepSeek configuration
    DEEPSEEK_BASE_URL: str = "https://api.deepseek.com/v1"
    DEEPSEEK_MODEL_NAME: str = "deepseek-chat"
    DEEPSEEK_TEMPERATURE: float = 0.0
    DEEPSEEK_TOP_P: float = 1.0
    DEEPSEEK_MAX_TOKENS: int = 2048
    DEEPSEEK_API_KEY: Optional[str] = os.getenv("DEEPSEEK_API_KEY")

    # =========================================================================
    # Chat Client Configuration
    # =========================================================================
    CHAT_API_URL: str = os.getenv("CHAT_API_URL", "http://localhost:5000/api/chat")
    CHAT_CLIENT_TIMEOUT: float = 60.0

    # Validate LLM service selection
    if LLM_SERVICE not in VALID_LLM_SERVICES:
        raise ValueError(
            f"Invalid LLM service: {LLM_SERVICE}. Must be one of {VALID_LLM_SERVICES}"
        )
