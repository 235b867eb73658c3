"""
Use case for the single "chat-with-<name>" tool.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from any_chat_completions_mcp.config.settings import ChatSettings
from any_chat_completions_mcp.entities.chat import (
    ApiFailure,
    ChatReply,
    ChatRequest,
    OpaqueFailure,
)
from any_chat_completions_mcp.entities.tool import (
    TextContent,
    ToolDescriptor,
    ToolErrorKind,
    ToolFailure,
    ToolInvocationResult,
    ToolOutcome,
)
from any_chat_completions_mcp.ports.llm.chat_completion_port import ChatCompletionPort

# Common model names that work with OpenAI-compatible APIs
KNOWN_MODELS: tuple[str, ...] = (
    "gpt-3.5-turbo",
    "gpt-4-turbo-preview",
    "gpt-4",
    "gpt-4-0125-preview",
    "claude-3-opus-20240229",
    "claude-3-sonnet-20240229",
    "claude-2.1",
    "gpt-4o-mini",
)


class ChatToolUseCase:
    """Validate a tool call, forward it to the chat endpoint and map the outcome."""

    def __init__(
        self,
        settings: ChatSettings,
        chat_client: ChatCompletionPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            settings: Loaded chat settings
            chat_client: Adapter for chat-completion calls
            logger: Logger instance to use for logging
        """
        self._settings = settings
        self._chat_client = chat_client
        self._logger = logger or logging.getLogger(__name__)

    @property
    def tool_name(self) -> str:
        return self._settings.tool_name

    def describe_tool(self) -> ToolDescriptor:
        """
        Describe the single tool exposed by the server.

        Returns:
            The tool descriptor derived from the settings
        """
        name = self._settings.display_name
        return ToolDescriptor(
            name=self._settings.tool_name,
            description=f"Text chat with {name}",
            input_schema={
                "type": "object",
                "properties": {
                    "content": {
                        "type": "string",
                        "description": f"The content of the chat to send to {name}",
                    }
                },
                "required": ["content"],
            },
        )

    async def invoke(
        self, tool_name: str, arguments: Optional[Mapping[str, Any]]
    ) -> ToolOutcome:
        """
        Run the tool.

        Args:
            tool_name: Name the client called
            arguments: Tool arguments; ``content`` is the text to send

        Returns:
            ToolInvocationResult on success, ToolFailure otherwise

        Raises:
            Exception: Any client error without an API error shape, unchanged
        """
        if tool_name != self._settings.tool_name:
            return ToolFailure(ToolErrorKind.UNKNOWN_TOOL, "Unknown tool")

        raw = (arguments or {}).get("content")
        content = "" if raw is None else str(raw)
        if not content:
            return ToolFailure(ToolErrorKind.MISSING_CONTENT, "Content is required")

        model = self._settings.model
        if model not in KNOWN_MODELS:
            self._logger.warning(
                f"Model {model} is not in list of common models. "
                "This may still work if your provider supports it."
            )

        self._logger.info(f"Sending {len(content)} characters to {model}")
        outcome = await self._chat_client.complete(
            ChatRequest.from_user_content(model, content)
        )

        if isinstance(outcome, ChatReply):
            return ToolInvocationResult(content=[TextContent(text=outcome.text)])
        if isinstance(outcome, ApiFailure):
            return self._map_api_failure(outcome)
        if isinstance(outcome, OpaqueFailure):
            raise outcome.cause
        raise TypeError(f"Unexpected chat outcome: {outcome!r}")

    def _map_api_failure(self, failure: ApiFailure) -> ToolFailure:
        if failure.status == 404:
            return ToolFailure(
                ToolErrorKind.MODEL_NOT_FOUND,
                f"Model '{self._settings.model}' not found or not accessible. Check:\n"
                "1. Your API key has access to this model\n"
                "2. The model name is correct for your provider\n"
                "3. Your provider supports this model\n"
                f"Common models: {', '.join(KNOWN_MODELS)}",
            )
        if failure.status == 429:
            return ToolFailure(
                ToolErrorKind.RATE_LIMITED,
                "API rate limit exceeded. Check:\n"
                "1. Your current API quota and billing status\n"
                "2. Implement rate limiting in your application\n"
                "3. Consider using a different model or provider",
            )
        return ToolFailure(
            ToolErrorKind.UPSTREAM_API_ERROR,
            f"API Error ({failure.status}): {failure.message}",
        )
