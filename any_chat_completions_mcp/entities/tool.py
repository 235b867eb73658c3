"""
Tool domain entities: the advertised descriptor and invocation outcomes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


class ToolErrorKind(str, Enum):
    UNKNOWN_TOOL = "unknown_tool"
    MISSING_CONTENT = "missing_content"
    MODEL_NOT_FOUND = "model_not_found"
    RATE_LIMITED = "rate_limited"
    UPSTREAM_API_ERROR = "upstream_api_error"


@dataclass(frozen=True)
class ToolDescriptor:
    """A single tool advertised to MCP clients."""

    name: str
    description: str
    input_schema: dict[str, Any]

    def get_details(self) -> dict[str, Any]:
        """
        Get the descriptor as a plain dictionary.

        Returns:
            Dictionary with ``name``, ``description`` and ``inputSchema`` keys
        """
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


@dataclass(frozen=True)
class TextContent:
    text: Optional[str]
    type: str = "text"


@dataclass(frozen=True)
class ToolInvocationResult:
    content: list[TextContent] = field(default_factory=list)

    def get_details(self) -> dict[str, Any]:
        return {"content": [{"type": c.type, "text": c.text} for c in self.content]}


@dataclass(frozen=True)
class ToolFailure:
    kind: ToolErrorKind
    message: str


ToolOutcome = Union[ToolInvocationResult, ToolFailure]
