"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from shell_project.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: int = self._parse_log_level(
            self._get_env("SHELL_LOG_LEVEL", "WARNING")
        )
        self.confirm_tokens: frozenset[str] = frozenset(
            t.strip()
            for t in self._get_env("SHELL_CONFIRM_TOKENS", "y,yes").split(",")
            if t.strip()
        )
        if not self.confirm_tokens:
            raise ConfigurationError("SHELL_CONFIRM_TOKENS must list at least one token")
        self.color: bool = not os.getenv("NO_COLOR")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _parse_log_level(self, value: str) -> int:
        """Translate a level name (or number) into a logging level."""
        value = value.strip()
        if value.isdigit():
            return int(value)
        level = logging.getLevelName(value.upper())
        if not isinstance(level, int):
            raise ConfigurationError(f"Invalid SHELL_LOG_LEVEL: {value}")
        return level

    def home_directory(self) -> str:
        """Home directory used for "~" expansion, read from HOME on every call."""
        return os.getenv("HOME") or os.path.expanduser("~")


# Global settings instance
settings = Settings()
