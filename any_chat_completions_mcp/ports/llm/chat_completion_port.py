"""
Chat completion port interface defining the contract for chat client implementations.
"""

from abc import ABC, abstractmethod

from any_chat_completions_mcp.entities.chat import ChatOutcome, ChatRequest


class ChatCompletionPort(ABC):
    """Port interface for chat-completion operations."""

    @abstractmethod
    async def complete(self, request: ChatRequest) -> ChatOutcome:
        """
        Submit a chat request to the provider.

        Implementations never raise for provider or transport failures; they
        report them as ``ApiFailure`` or ``OpaqueFailure``.

        Args:
            request: The chat request to submit

        Returns:
            ChatReply, ApiFailure or OpaqueFailure
        """
        pass

