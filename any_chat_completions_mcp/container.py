"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Any, Optional

from any_chat_completions_mcp.adapters.llm.openai_adapter import OpenAIAdapter
from any_chat_completions_mcp.config.settings import ChatSettings
from any_chat_completions_mcp.ports.llm.chat_completion_port import ChatCompletionPort
from any_chat_completions_mcp.server.mcp_server import ChatToolServer
from any_chat_completions_mcp.use_cases.chat.chat_tool import ChatToolUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: ChatSettings, logger: Optional[logging.Logger] = None):
        self.settings = settings
        self._instances: dict[str, Any] = {}
        self._logger = logger or logging.getLogger(__name__)

    def get_chat_client(self) -> ChatCompletionPort:
        """
        Get chat client adapter instance.

        Returns:
            ChatCompletionPort implementation
        """
        if "chat_client" not in self._instances:
            self._instances["chat_client"] = OpenAIAdapter(
                api_key=self.settings.api_key,
                api_base=self.settings.base_url,
                logger=self._logger,
            )
        return self._instances["chat_client"]

    def get_chat_tool_use_case(self) -> ChatToolUseCase:
        """
        Get chat tool use case with injected dependencies.

        Returns:
            Configured ChatToolUseCase
        """
        if "chat_tool_use_case" not in self._instances:
            self._instances["chat_tool_use_case"] = ChatToolUseCase(
                self.settings, self.get_chat_client(), self._logger
            )
        return self._instances["chat_tool_use_case"]

    def get_server(self) -> ChatToolServer:
        if "server" not in self._instances:
            self._instances["server"] = ChatToolServer(
                self.get_chat_tool_use_case(), self._logger
            )
        return self._instances["server"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
