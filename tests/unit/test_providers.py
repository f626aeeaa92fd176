"""Unit tests for OpenAI-backed providers with a mocked client."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from ragdesk.application.dto.chat_dto import ChatMessage
from ragdesk.domain.exceptions import ChatProviderError, EmbeddingProviderError
from ragdesk.infrastructure.chat.openai_chat_provider import OpenAIChatProvider
from ragdesk.infrastructure.embedding.openai_provider import OpenAIEmbeddingProvider
from ragdesk.interfaces.api.streaming import TokenRelay

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/test")


def _status_error(status: int, message: str) -> openai.APIStatusError:
    return openai.APIStatusError(
        message, response=httpx.Response(status, request=_REQUEST), body=None
    )


def _embedding_client(data=None, side_effect=None) -> MagicMock:
    client = MagicMock()
    client.embeddings.create = AsyncMock(
        return_value=SimpleNamespace(data=data), side_effect=side_effect
    )
    return client


class _FakeCompletion:
    """Stands in for openai.AsyncStream."""

    def __init__(self, deltas: list[str | None]) -> None:
        self._deltas = deltas
        self.close = AsyncMock()

    async def __aiter__(self):
        for d in self._deltas:
            if d == "<no-choices>":
                yield SimpleNamespace(choices=[])
            else:
                yield SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=d))])


# --- OpenAIEmbeddingProvider ---


@pytest.mark.asyncio
async def test_embed_orders_by_index_and_batches() -> None:
    client = _embedding_client(
        data=[
            SimpleNamespace(index=1, embedding=[0.2]),
            SimpleNamespace(index=0, embedding=[0.1]),
        ]
    )
    provider = OpenAIEmbeddingProvider(client, "text-embedding-3-small")

    result = await provider.embed(["a", "b"])

    assert result == [[0.1], [0.2]]
    client.embeddings.create.assert_awaited_once_with(
        model="text-embedding-3-small", input=["a", "b"]
    )
    assert provider.model == "text-embedding-3-small"


@pytest.mark.asyncio
async def test_embed_empty_input_skips_call() -> None:
    client = _embedding_client(data=[])
    assert await OpenAIEmbeddingProvider(client, "m").embed([]) == []
    client.embeddings.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_embed_count_mismatch_is_fatal() -> None:
    client = _embedding_client(data=[SimpleNamespace(index=0, embedding=[0.1])])
    with pytest.raises(EmbeddingProviderError, match="Partial failure"):
        await OpenAIEmbeddingProvider(client, "m").embed(["a", "b"])


@pytest.mark.asyncio
async def test_embed_status_error_keeps_provider_status() -> None:
    client = _embedding_client(side_effect=_status_error(429, "Rate limit reached"))
    with pytest.raises(EmbeddingProviderError) as exc_info:
        await OpenAIEmbeddingProvider(client, "m").embed(["a"])
    assert exc_info.value.status == 429
    assert "Rate limit" in str(exc_info.value)


@pytest.mark.asyncio
async def test_embed_connection_error_is_500() -> None:
    client = _embedding_client(side_effect=openai.APIConnectionError(request=_REQUEST))
    with pytest.raises(EmbeddingProviderError) as exc_info:
        await OpenAIEmbeddingProvider(client, "m").embed(["a"])
    assert exc_info.value.status == 500


# --- OpenAIChatProvider ---


@pytest.mark.asyncio
async def test_chat_stream_yields_content_deltas_and_closes() -> None:
    completion = _FakeCompletion(["Hel", None, "<no-choices>", "lo", ""])
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=completion)
    provider = OpenAIChatProvider(client, "gpt-4o")

    tokens = await provider.stream(
        [ChatMessage("system", "sys"), ChatMessage("user", "hi")], temperature=0.0
    )
    assert [t async for t in tokens] == ["Hel", "lo"]
    completion.close.assert_awaited_once()
    client.chat.completions.create.assert_awaited_once_with(
        model="gpt-4o",
        messages=[
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "hi"},
        ],
        stream=True,
        temperature=0.0,
    )


@pytest.mark.asyncio
async def test_chat_stream_aclose_releases_upstream() -> None:
    completion = _FakeCompletion(["a", "b", "c"])
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=completion)

    tokens = await OpenAIChatProvider(client, "gpt-4o").stream([ChatMessage("user", "q")])
    assert await tokens.__anext__() == "a"
    await tokens.aclose()
    completion.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_chat_stream_start_failure_raises_provider_error() -> None:
    client = MagicMock()
    client.chat.completions.create = AsyncMock(side_effect=_status_error(401, "Invalid API key"))
    with pytest.raises(ChatProviderError) as exc_info:
        await OpenAIChatProvider(client, "gpt-4o").stream([ChatMessage("user", "q")])
    assert exc_info.value.status == 401


@pytest.mark.asyncio
async def test_chat_stream_released_when_relay_closes_before_first_token() -> None:
    completion = _FakeCompletion(["a", "b"])
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=completion)

    tokens = await OpenAIChatProvider(client, "gpt-4o").stream([ChatMessage("user", "q")])
    relay = TokenRelay(tokens)
    await relay.close()

    completion.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_chat_stream_mid_stream_error_releases_upstream() -> None:
    class _BrokenCompletion(_FakeCompletion):
        async def __aiter__(self):
            yield SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content="a"))])
            raise openai.APIConnectionError(request=_REQUEST)

    completion = _BrokenCompletion([])
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=completion)

    tokens = await OpenAIChatProvider(client, "gpt-4o").stream([ChatMessage("user", "q")])
    assert await tokens.__anext__() == "a"
    with pytest.raises(openai.APIConnectionError):
        await tokens.__anext__()
    completion.close.assert_awaited_once()
    await tokens.aclose()
    completion.close.assert_awaited_once()
