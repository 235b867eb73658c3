"""
Configuration settings for the application.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv

from any_chat_completions_mcp.exceptions import ConfigurationError

BASE_URL_ENV = "AI_CHAT_BASE_URL"
API_KEY_ENV = "AI_CHAT_KEY"
MODEL_ENV = "AI_CHAT_MODEL"
NAME_ENV = "AI_CHAT_NAME"


@dataclass(frozen=True)
class ChatSettings:
    """Settings for the chat endpoint and the tool exposed over MCP."""

    base_url: str
    api_key: str
    model: str
    display_name: str

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "ChatSettings":
        """
        Build settings from an environment mapping.

        Args:
            environ: Mapping to read variables from (usually ``os.environ``)

        Returns:
            The loaded settings

        Raises:
            ConfigurationError: If a required variable is missing or empty
        """
        return cls(
            base_url=_get_required_env(environ, BASE_URL_ENV),
            api_key=_get_required_env(environ, API_KEY_ENV),
            model=_get_required_env(environ, MODEL_ENV),
            display_name=_get_required_env(environ, NAME_ENV),
        )

    @property
    def tool_slug(self) -> str:
        # Only the first space is replaced; existing clients depend on this name.
        return self.display_name.lower().replace(" ", "-", 1)

    @property
    def tool_name(self) -> str:
        return f"chat-with-{self.tool_slug}"

    def get_model_info(self) -> dict[str, Any]:
        """Describe the configured endpoint without leaking the API key."""
        return {
            "provider": self.base_url,
            "model": self.model,
            "api_key": _mask(self.api_key),
            "tool": self.tool_name,
        }


def _mask(secret: str) -> str:
    # Short keys would be shown whole by a prefix.
    if len(secret) <= 8:
        return "***"
    return secret[:4] + "..."


def _get_required_env(environ: Mapping[str, str], key: str) -> str:
    """Get a required environment variable, raise error if missing."""
    value = environ.get(key)
    if not value:
        raise ConfigurationError(
            f"Required environment variable {key} is not set", variable=key
        )
    return value


def load_settings() -> ChatSettings:
    """Load settings from the process environment, reading a .env file first."""
    _ = load_dotenv()
    return ChatSettings.from_env(os.environ)
