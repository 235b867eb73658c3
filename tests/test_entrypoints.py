"""
Tests for the console entry points.
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

from any_chat_completions_mcp import cli_chat
from any_chat_completions_mcp import main as server_main
from any_chat_completions_mcp.entities.tool import (
    TextContent,
    ToolErrorKind,
    ToolFailure,
    ToolInvocationResult,
)
from any_chat_completions_mcp.exceptions import ConfigurationError


class TestServerMain:
    """Test cases for the server entry point."""

    def test_missing_configuration_exits_non_zero(self):
        error = ConfigurationError(
            "Required environment variable AI_CHAT_KEY is not set",
            variable="AI_CHAT_KEY",
        )
        with patch.object(server_main, "load_settings", side_effect=error), patch.object(
            server_main, "DependencyContainer"
        ) as container_cls:
            assert server_main.main([]) == 1

        container_cls.assert_not_called()

    def test_serves_until_done(self, settings):
        with patch.object(server_main, "load_settings", return_value=settings), patch.object(
            server_main, "DependencyContainer"
        ) as container_cls:
            server = container_cls.return_value.get_server.return_value
            server.serve = AsyncMock(return_value=None)

            assert server_main.main(["--log-level", "DEBUG"]) == 0

        container_cls.assert_called_once_with(settings)
        server.serve.assert_awaited_once()

    def test_server_error_exits_non_zero(self, settings):
        with patch.object(server_main, "load_settings", return_value=settings), patch.object(
            server_main, "DependencyContainer"
        ) as container_cls:
            server = container_cls.return_value.get_server.return_value
            server.serve = AsyncMock(side_effect=RuntimeError("stdin closed"))

            assert server_main.main([]) == 1


class TestCliChat:
    """Test cases for the one-shot probe."""

    def _patched(self, settings, use_case):
        container = MagicMock()
        container.get_chat_tool_use_case.return_value = use_case
        return (
            patch.object(cli_chat, "load_settings", return_value=settings),
            patch.object(cli_chat, "DependencyContainer", return_value=container),
        )

    def test_content_prints_reply(self, settings, capsys):
        use_case = MagicMock()
        use_case.tool_name = "chat-with-my-bot"
        use_case.invoke = AsyncMock(
            return_value=ToolInvocationResult(content=[TextContent(text="hello!")])
        )
        load, container = self._patched(settings, use_case)

        with load, container:
            assert cli_chat.main(["--content", "hi"]) == 0

        use_case.invoke.assert_awaited_once_with("chat-with-my-bot", {"content": "hi"})
        out = json.loads(capsys.readouterr().out)
        assert out == {"content": [{"type": "text", "text": "hello!"}]}

    def test_failure_exits_one(self, settings, capsys):
        use_case = MagicMock()
        use_case.invoke = AsyncMock(
            return_value=ToolFailure(ToolErrorKind.UPSTREAM_API_ERROR, "API Error (500): boom")
        )
        load, container = self._patched(settings, use_case)

        with load, container:
            assert cli_chat.main(["--content", "hi"]) == 1

        assert "API Error (500): boom" in capsys.readouterr().err

    def test_list_tools(self, settings, use_case, capsys):
        load, container = self._patched(settings, use_case)

        with load, container:
            assert cli_chat.main(["--list-tools"]) == 0

        tools = json.loads(capsys.readouterr().out)
        assert [t["name"] for t in tools] == ["chat-with-my-bot"]
        assert tools[0]["inputSchema"]["required"] == ["content"]

    def test_network_failure_exits_one(self, settings, capsys):
        use_case = MagicMock()
        use_case.invoke = AsyncMock(side_effect=ConnectionRefusedError("connection refused"))
        load, container = self._patched(settings, use_case)

        with load, container:
            assert cli_chat.main(["--content", "hi"]) == 1

        assert "connection refused" in capsys.readouterr().err

    def test_configuration_error(self, capsys):
        error = ConfigurationError("Required environment variable AI_CHAT_NAME is not set")
        with patch.object(cli_chat, "load_settings", side_effect=error):
            assert cli_chat.main(["--content", "hi"]) == 2

        assert "AI_CHAT_NAME" in capsys.readouterr().err
