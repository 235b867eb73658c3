"""
MCP server exposing the chat tool over stdio.
"""

import logging
from typing import Any, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from any_chat_completions_mcp.entities.tool import ToolFailure
from any_chat_completions_mcp.exceptions import (
    PromptNotFoundError,
    ResourceNotFoundError,
    ToolError,
)
from any_chat_completions_mcp.use_cases.chat.chat_tool import ChatToolUseCase

SERVER_NAME = "any-chat-completions-mcp"
SERVER_VERSION = "0.1.0"


class ChatToolServer:
    """Handlers for the MCP requests this server answers."""

    def __init__(
        self, use_case: ChatToolUseCase, logger: Optional[logging.Logger] = None
    ) -> None:
        self._use_case = use_case
        self._logger = logger or logging.getLogger(__name__)

    async def list_resources(self) -> list[types.Resource]:
        return []

    async def read_resource(self, uri: object) -> str:
        raise ResourceNotFoundError("Resource not found")

    async def list_tools(self) -> list[types.Tool]:
        descriptor = self._use_case.describe_tool()
        return [
            types.Tool(
                name=descriptor.name,
                description=descriptor.description,
                inputSchema=descriptor.input_schema,
            )
        ]

    async def call_tool(
        self, name: str, arguments: Optional[dict[str, Any]]
    ) -> list[types.TextContent]:
        """
        Run the chat tool.

        Raises:
            ToolError: If the call is rejected or the provider reports an API error
        """
        self._logger.info(f"Tool call: {name}")
        outcome = await self._use_case.invoke(name, arguments)
        if isinstance(outcome, ToolFailure):
            self._logger.info(f"Tool call {name} failed: {outcome.kind.value}")
            raise ToolError(outcome.kind, outcome.message)
        return [
            types.TextContent(type="text", text=item.text or "")
            for item in outcome.content
        ]

    async def list_prompts(self) -> list[types.Prompt]:
        return []

    async def get_prompt(
        self, name: str, arguments: Optional[dict[str, str]]
    ) -> types.GetPromptResult:
        raise PromptNotFoundError("Unknown prompt")

    def build(self) -> Server:
        """
        Register the handlers on a low-level MCP server.

        Returns:
            The configured server, not yet connected to a transport
        """
        server: Server = Server(SERVER_NAME, version=SERVER_VERSION)
        server.list_resources()(self.list_resources)
        server.read_resource()(self.read_resource)
        server.list_tools()(self.list_tools)
        # The use case owns argument validation, including a missing 'content'.
        server.call_tool(validate_input=False)(self.call_tool)
        server.list_prompts()(self.list_prompts)
        server.get_prompt()(self.get_prompt)
        return server

    async def serve(self) -> None:
        """Serve requests on stdin/stdout until the client disconnects."""
        server = self.build()
        async with stdio_server() as (read_stream, write_stream):
            self._logger.info(f"{SERVER_NAME} listening on stdio")
            await server.run(
                read_stream, write_stream, server.create_initialization_options()
            )
