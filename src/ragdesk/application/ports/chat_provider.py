"""Chat provider port - streamed chat completions."""

from collections.abc import AsyncIterator
from typing import Protocol

from ragdesk.application.dto.chat_dto import ChatMessage


class TokenStream(Protocol):
    """Async iterator of text increments that owns an upstream resource."""

    def __aiter__(self) -> AsyncIterator[str]: ...

    async def __anext__(self) -> str: ...

    async def aclose(self) -> None: ...


class ChatProvider(Protocol):
    """Port for streaming chat completions.

    ``stream`` returns once the upstream accepted the request; the returned
    stream yields text increments and releases the upstream on aclose(),
    whether or not iteration has started.
    """

    async def stream(
        self, messages: list[ChatMessage], temperature: float = 0.0
    ) -> TokenStream: ...
