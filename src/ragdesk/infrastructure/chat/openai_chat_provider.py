"""OpenAI-compatible streaming chat provider."""

import logging

import openai
from openai import AsyncOpenAI, AsyncStream
from openai.types.chat import ChatCompletionChunk

from ragdesk.application.dto.chat_dto import ChatMessage
from ragdesk.domain.exceptions import ChatProviderError

logger = logging.getLogger(__name__)


class OpenAIChatProvider:
    """Chat completions with token streaming over an OpenAI-compatible API."""

    def __init__(self, client: AsyncOpenAI, model: str) -> None:
        self._client = client
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    async def stream(
        self, messages: list[ChatMessage], temperature: float = 0.0
    ) -> "CompletionTokenStream":
        """Start a streamed completion and return its text increments."""
        try:
            completion = await self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": m.role, "content": m.content} for m in messages],
                stream=True,
                temperature=temperature,
            )
        except openai.APIStatusError as e:
            raise ChatProviderError(e.message, status=e.status_code) from e
        except openai.OpenAIError as e:
            raise ChatProviderError(str(e)) from e
        return CompletionTokenStream(completion)


class CompletionTokenStream:
    """Non-empty content deltas of a streamed completion.

    The HTTP response is released on exhaustion, on error, and on
    ``aclose()``, including when iteration never started.
    """

    def __init__(self, completion: AsyncStream[ChatCompletionChunk]) -> None:
        self._completion = completion
        self._chunks = aiter(completion)
        self._closed = False

    def __aiter__(self) -> "CompletionTokenStream":
        return self

    async def __anext__(self) -> str:
        if self._closed:
            raise StopAsyncIteration
        try:
            while True:
                chunk = await anext(self._chunks)
                if not chunk.choices:
                    continue
                content = chunk.choices[0].delta.content
                if content:
                    return content
        except BaseException:
            await self.aclose()
            raise

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self._completion.close()
        logger.debug("Closed upstream completion stream")
