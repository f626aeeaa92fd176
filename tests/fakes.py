"""In-memory fakes for ragdesk tests."""

from __future__ import annotations

import math
import string
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from uuid import UUID, uuid4

from ragdesk.application.dto.chat_dto import ChatMessage
from ragdesk.domain.entities import DocumentChunk, Lead, MatchDocumentResult, SiteContent
from ragdesk.domain.exceptions import StoreError
from ragdesk.infrastructure.auth.keycloak_provider import OIDCUser


# --- Fake repositories ---


def _cosine(a: list[float], b: list[float]) -> float:
    dot = sum(x * y for x, y in zip(a, b))
    norm = math.sqrt(sum(x * x for x in a)) * math.sqrt(sum(y * y for y in b))
    return dot / norm if norm else 0.0


class FakeVectorStore:
    """In-memory vector store computing cosine similarity like match_documents."""

    def __init__(self) -> None:
        self.rows: list[DocumentChunk] = []
        self.fail_with: StoreError | None = None
        self.search_calls: list[dict] = []

    async def insert_chunks(self, chunks: list[DocumentChunk]) -> list[DocumentChunk]:
        if self.fail_with:
            raise self.fail_with
        stored = [replace(c, id=uuid4()) for c in chunks]
        self.rows.extend(stored)
        return stored

    async def search(
        self,
        query_embedding: list[float],
        match_count: int,
        min_similarity: float,
        filter_source: str | None = None,
    ) -> list[MatchDocumentResult]:
        self.search_calls.append(
            {
                "match_count": match_count,
                "min_similarity": min_similarity,
                "filter_source": filter_source,
            }
        )
        if self.fail_with:
            raise self.fail_with
        scored = [
            MatchDocumentResult(
                id=c.id,
                content=c.content,
                source=c.source,
                chunk_index=c.chunk_index,
                similarity=_cosine(query_embedding, c.embedding),
                metadata=c.metadata,
            )
            for c in self.rows
            if filter_source is None or c.source == filter_source
        ]
        scored = [m for m in scored if m.similarity >= min_similarity]
        scored.sort(key=lambda m: m.similarity, reverse=True)
        return scored[:match_count]


class FakeSiteContentRepository:
    """In-memory site content repository keyed by (key, locale)."""

    def __init__(self) -> None:
        self._by_key: dict[tuple[str, str], SiteContent] = {}

    async def list_published(
        self, section: str | None = None, key: str | None = None
    ) -> list[SiteContent]:
        return [
            c
            for c in self._by_key.values()
            if c.published
            and (section is None or c.section == section)
            and (key is None or c.key == key)
        ]

    async def upsert(self, content: SiteContent) -> SiteContent:
        existing = self._by_key.get((content.key, content.locale))
        if existing:
            content = replace(content, id=existing.id, created_at=existing.created_at)
        self._by_key[(content.key, content.locale)] = content
        return content

    async def delete(self, content_id: UUID) -> bool:
        for k, c in list(self._by_key.items()):
            if c.id == content_id:
                del self._by_key[k]
                return True
        return False


class FakeLeadRepository:
    """In-memory lead repository."""

    def __init__(self) -> None:
        self.leads: list[Lead] = []

    async def create(self, lead: Lead) -> Lead:
        self.leads.append(lead)
        return lead


class FakeUserRepository:
    """In-memory user profiles: user_id -> role."""

    def __init__(self) -> None:
        self.roles: dict[str, str] = {}

    async def get_role(self, user_id: str) -> str | None:
        return self.roles.get(user_id)


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.vectors = FakeVectorStore()
        self.contents = FakeSiteContentRepository()
        self.leads = FakeLeadRepository()
        self.users = FakeUserRepository()
        self.ping_error: StoreError | None = None

    async def ping(self) -> None:
        if self.ping_error:
            raise self.ping_error

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory that yields the same UoW on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Fake providers ---


def letter_vector(text: str) -> list[float]:
    """Letter frequency vector plus a bias term, so no vector is all zeros."""
    lowered = text.lower()
    return [float(lowered.count(ch)) for ch in string.ascii_lowercase] + [1.0]


class FakeEmbeddingProvider:
    """Deterministic embeddings; ``drop`` removes vectors to simulate partial failure."""

    def __init__(self, model: str = "fake-embed", drop: int = 0) -> None:
        self._model = model
        self.drop = drop
        self.calls: list[list[str]] = []

    @property
    def model(self) -> str:
        return self._model

    async def embed(self, texts: list[str]) -> list[list[float]]:
        self.calls.append(list(texts))
        vectors = [letter_vector(t) for t in texts]
        return vectors[: len(vectors) - self.drop] if self.drop else vectors


class FakeChatProvider:
    """Records the messages and streams back the context section word by word.

    With ``fail_after`` set, the stream raises after that many tokens.
    """

    def __init__(self, fail_after: int | None = None) -> None:
        self.calls: list[tuple[list[ChatMessage], float]] = []
        self.closed = False
        self.fail_after = fail_after

    async def stream(
        self, messages: list[ChatMessage], temperature: float = 0.0
    ) -> AsyncGenerator[str, None]:
        self.calls.append((messages, temperature))
        context = messages[0].content.split("Context:", 1)[-1].strip()
        return self._tokens(["Based on the context: "] + [w + " " for w in context.split()])

    async def _tokens(self, tokens: list[str]) -> AsyncGenerator[str, None]:
        try:
            for i, t in enumerate(tokens):
                if self.fail_after is not None and i >= self.fail_after:
                    raise ConnectionResetError("upstream connection reset")
                yield t
        finally:
            self.closed = True


class FakeKeycloak:
    """Maps known bearer tokens to user ids."""

    def __init__(self, tokens: dict[str, str] | None = None) -> None:
        self._tokens = tokens or {}

    async def decode_token(self, token: str) -> OIDCUser | None:
        user_id = self._tokens.get(token)
        if not user_id:
            return None
        return OIDCUser(user_id=user_id, email=None, username=user_id)
