"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from file_manager.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_CHUNK_SIZE = 64 * 1024
DEFAULT_BROTLI_QUALITY = 11


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.start_directory: str = os.path.abspath(
            os.path.expanduser(self._get_env("FILE_MANAGER_START_DIR", "~"))
        )
        self.chunk_size: int = self._get_int_env(
            "FILE_MANAGER_CHUNK_SIZE", DEFAULT_CHUNK_SIZE, minimum=1
        )
        self.brotli_quality: int = self._get_int_env(
            "FILE_MANAGER_BROTLI_QUALITY", DEFAULT_BROTLI_QUALITY, minimum=0, maximum=11
        )
        self.log_level: str = self._get_log_level("FILE_MANAGER_LOG_LEVEL", "WARNING")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int_env(
        self,
        key: str,
        default: int,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> int:
        """Get an integer environment variable, raise error if out of range."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer, got {raw!r}")
        if minimum is not None and value < minimum:
            raise ConfigurationError(f"Environment variable {key} must be >= {minimum}")
        if maximum is not None and value > maximum:
            raise ConfigurationError(f"Environment variable {key} must be <= {maximum}")
        return value

    def _get_log_level(self, key: str, default: str) -> str:
        level = self._get_env(key, default).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(f"Environment variable {key} is not a log level: {level}")
        return level


# Global settings instance
settings = Settings()
