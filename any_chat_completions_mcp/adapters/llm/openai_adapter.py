"""
OpenAI adapter implementation for chat-completion operations.
"""

import logging
from typing import Any, Optional, cast

from openai import AsyncOpenAI
from openai.types.chat import ChatCompletionMessageParam
from typing_extensions import override

from any_chat_completions_mcp.entities.chat import (
    ApiFailure,
    ChatOutcome,
    ChatReply,
    ChatRequest,
    OpaqueFailure,
)
from any_chat_completions_mcp.ports.llm.chat_completion_port import ChatCompletionPort


def classify_error(error: Exception) -> ChatOutcome:
    """
    Sort an exception raised by the chat client into an outcome.

    Any error exposing an integer ``status_code`` is treated as an API error,
    whatever transport layer produced it.

    Args:
        error: The exception raised by the client

    Returns:
        ApiFailure for recognized API errors, OpaqueFailure otherwise
    """
    status = getattr(error, "status_code", None)
    if isinstance(status, int) and not isinstance(status, bool):
        message = getattr(error, "message", None)
        if not isinstance(message, str):
            message = str(error)
        return ApiFailure(status=status, message=message)
    return OpaqueFailure(cause=error)


class OpenAIAdapter(ChatCompletionPort):
    """OpenAI-compatible implementation of the chat completion port."""

    def __init__(
        self,
        api_key: str,
        api_base: str,
        client: Optional[AsyncOpenAI] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the OpenAI adapter.

        Args:
            api_key: Bearer credential for the endpoint
            api_base: Base URL of the OpenAI-compatible endpoint
            client: Pre-built client, mainly for tests. Built from the other arguments if None.
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self.api_key: str = api_key
        self.api_base: str = api_base
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self.client: AsyncOpenAI = client or AsyncOpenAI(
            api_key=self.api_key, base_url=self.api_base
        )

    def _extract_response_content(self, response: Any) -> Optional[str]:
        choices = getattr(response, "choices", None) or []
        if not choices:
            return None
        message = getattr(choices[0], "message", None)
        if message is None:
            return None
        return getattr(message, "content", None)

    @override
    async def complete(self, request: ChatRequest) -> ChatOutcome:
        messages = cast(list[ChatCompletionMessageParam], request.to_openai_messages())
        try:
            response = await self.client.chat.completions.create(
                model=request.model,
                messages=messages,
            )
        except Exception as e:
            outcome = classify_error(e)
            if isinstance(outcome, ApiFailure):
                self._logger.warning(
                    f"Chat completion failed with status {outcome.status}: {outcome.message}"
                )
            else:
                self._logger.debug(f"Chat completion failed: {e!r}")
            return outcome

        return ChatReply(text=self._extract_response_content(response))

