"""
Pytest configuration and shared fixtures.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from any_chat_completions_mcp.config.settings import ChatSettings
from any_chat_completions_mcp.entities.chat import ChatReply
from any_chat_completions_mcp.ports.llm.chat_completion_port import ChatCompletionPort
from any_chat_completions_mcp.use_cases.chat.chat_tool import ChatToolUseCase


@pytest.fixture
def settings():
    """
    Settings matching a typical OpenAI-compatible deployment.

    Returns:
        ChatSettings instance
    """
    return ChatSettings(
        base_url="https://api.example.com",
        api_key="k",
        model="gpt-4",
        display_name="My Bot",
    )


@pytest.fixture
def env(settings):
    """Environment mapping equivalent to the ``settings`` fixture."""
    return {
        "AI_CHAT_BASE_URL": settings.base_url,
        "AI_CHAT_KEY": settings.api_key,
        "AI_CHAT_MODEL": settings.model,
        "AI_CHAT_NAME": settings.display_name,
    }


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def chat_client():
    """
    Stub chat client replying "Hello"; ``complete.await_count`` counts calls.

    Returns:
        Mocked ChatCompletionPort
    """
    client = MagicMock(spec=ChatCompletionPort)
    client.complete = AsyncMock(return_value=ChatReply(text="Hello"))
    return client


@pytest.fixture
def use_case(settings, chat_client, mock_logger):
    return ChatToolUseCase(settings, chat_client, mock_logger)
