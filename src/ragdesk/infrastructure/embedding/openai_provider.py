"""OpenAI-compatible embedding provider."""

import openai
from openai import AsyncOpenAI

from ragdesk.domain.exceptions import EmbeddingProviderError


class OpenAIEmbeddingProvider:
    """Embedding provider using OpenAI-compatible API."""

    def __init__(self, client: AsyncOpenAI, model: str) -> None:
        self._client = client
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    async def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings for texts, one vector per text in input order."""
        if not texts:
            return []
        try:
            response = await self._client.embeddings.create(
                model=self._model,
                input=texts,
            )
        except openai.APIStatusError as e:
            raise EmbeddingProviderError(e.message, status=e.status_code) from e
        except openai.OpenAIError as e:
            raise EmbeddingProviderError(str(e)) from e

        data = sorted(response.data or [], key=lambda d: d.index)
        if len(data) != len(texts):
            raise EmbeddingProviderError("Partial failure in embedding generation")
        return [d.embedding for d in data]
