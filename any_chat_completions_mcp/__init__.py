"""any_chat_completions_mcp package: an MCP server exposing one chat tool backed by
an OpenAI-compatible chat-completion endpoint.

Submodules are imported directly; keep __all__ empty.
"""

__all__: list[str] = []
