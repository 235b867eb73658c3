"""
Chat domain entities: the outbound request and its possible outcomes.
"""

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class ChatMessage:
    role: str
    content: str


@dataclass(frozen=True)
class ChatRequest:
    """A chat-completion request for a single model."""

    model: str
    messages: tuple[ChatMessage, ...] = field(default_factory=tuple)

    @classmethod
    def from_user_content(cls, model: str, content: str) -> "ChatRequest":
        return cls(model=model, messages=(ChatMessage(role="user", content=content),))

    def to_openai_messages(self) -> list[dict[str, str]]:
        return [{"role": m.role, "content": m.content} for m in self.messages]


@dataclass(frozen=True)
class ChatReply:
    """Successful completion; ``text`` is None when the provider sent no content."""

    text: Optional[str]


@dataclass(frozen=True)
class ApiFailure:
    """The provider answered with an HTTP error status."""

    status: int
    message: str


@dataclass(frozen=True)
class OpaqueFailure:
    """The call failed without an API error shape (network, DNS, ...)."""

    cause: Exception


ChatOutcome = Union[ChatReply, ApiFailure, OpaqueFailure]
