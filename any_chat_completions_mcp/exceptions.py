"""
Custom exceptions for the application.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from any_chat_completions_mcp.entities.tool import ToolErrorKind


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, variable: Optional[str] = None):
        super().__init__(message)
        self.variable = variable


class ToolError(BaseAppError):
    """Exception raised when a tool invocation fails.

    The ``kind`` attribute tells callers which check failed.
    """

    def __init__(self, kind: "ToolErrorKind", message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


class ResourceNotFoundError(BaseAppError):
    """Exception raised when a resource is requested; none are exposed."""

    pass


class PromptNotFoundError(BaseAppError):
    """Exception raised when a prompt is requested; none are exposed."""

    pass
