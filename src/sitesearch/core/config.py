"""
Site Search Configuration

Settings for translation loading, query handling and excerpt generation.
Values are read from environment variables at import time.
"""

import logging
import os
from enum import Enum


class Environment(str, Enum):
    """Application environment"""

    PRODUCTION = "production"
    DEVELOPMENT = "development"
    TEST = "test"


def _get_environment() -> Environment:
    """Get and validate ENVIRONMENT variable."""
    env_value = os.getenv("ENVIRONMENT", Environment.DEVELOPMENT.value)
    try:
        return Environment(env_value.lower())
    except ValueError:
        raise RuntimeError(
            f"Invalid ENVIRONMENT value: '{env_value}'. "
            "Must be 'production', 'development', or 'test'."
        )


class Settings:
    """Site search configuration"""

    # Environment
    ENVIRONMENT: Environment = _get_environment()

    # Translations
    # Path to a JSON file or an http(s) URL serving the same document
    TRANSLATIONS_SOURCE: str = os.getenv("TRANSLATIONS_SOURCE", "translations.json")
    DEFAULT_LANGUAGE: str = os.getenv("DEFAULT_LANGUAGE", "es")
    LOAD_TIMEOUT_SEC: float = float(os.getenv("LOAD_TIMEOUT_SEC", "10"))

    # Search Settings
    MIN_QUERY_LEN: int = int(os.getenv("MIN_QUERY_LEN", "2"))

    # Excerpts
    EXCERPT_BEFORE: int = int(os.getenv("EXCERPT_BEFORE", "40"))
    EXCERPT_AFTER: int = int(os.getenv("EXCERPT_AFTER", "60"))
    EXCERPT_FALLBACK_LEN: int = int(os.getenv("EXCERPT_FALLBACK_LEN", "120"))

    @property
    def LOG_LEVEL(self) -> int:
        """DEBUG while developing, INFO otherwise."""
        if self.ENVIRONMENT == Environment.DEVELOPMENT:
            return logging.DEBUG
        return logging.INFO


settings = Settings()
