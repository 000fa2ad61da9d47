"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from pathcomplete.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_MAX_RESULTS = 10


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.home_directory: str = self._get_home_directory()
        self.max_results: int = self._get_positive_int_env(
            "PATHCOMPLETE_MAX_RESULTS", DEFAULT_MAX_RESULTS
        )
        self.log_level: str = self._get_env("LOG_LEVEL", "INFO").upper()

        # HTTP server
        self.host: str = self._get_env("HOST", "127.0.0.1")
        self.port: int = self._get_positive_int_env("PORT", 8000)
        self.reload: bool = self._get_env("RELOAD", "0") in {"1", "true", "True"}

    def _get_home_directory(self) -> str:
        """Home directory substituted for '~/', defaulting to the user's home."""
        home = self._get_env("PATHCOMPLETE_HOME", os.path.expanduser("~"))
        return validate_home_directory(home, "PATHCOMPLETE_HOME")

    def _get_positive_int_env(self, key: str, default: int) -> int:
        """Get a positive integer environment variable."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got: {raw}")
        if value < 1:
            raise ConfigurationError(
                f"{key} must be a positive integer, got: {value}"
            )
        return value

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)


def validate_home_directory(home: str, source: str) -> str:
    """Return ``home`` if absolute, else raise ConfigurationError naming ``source``."""
    if not os.path.isabs(home):
        raise ConfigurationError(f"{source} must be an absolute path, got: {home}")
    return home


# Global settings instance
settings = Settings()
