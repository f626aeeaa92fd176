"""PostgreSQL (pgvector) vector store implementation."""

import logging
from uuid import uuid4

import psycopg
from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from ragdesk.domain.entities import DocumentChunk, MatchDocumentResult
from ragdesk.domain.exceptions import StoreError

logger = logging.getLogger(__name__)


class PostgresVectorStore:
    """Stores chunks in ``documents`` and searches via ``match_documents``.

    Similarity is computed by the database function; this class only
    forwards parameters and maps rows.
    """

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def insert_chunks(self, chunks: list[DocumentChunk]) -> list[DocumentChunk]:
        """Insert chunks in batch, assigning ids."""
        stored = [
            DocumentChunk(
                content=c.content,
                source=c.source,
                chunk_index=c.chunk_index,
                embedding=c.embedding,
                metadata=c.metadata,
                id=uuid4(),
            )
            for c in chunks
        ]
        try:
            async with self._conn.cursor() as cur:
                await cur.executemany(
                    "INSERT INTO documents (id, source, chunk_index, content, metadata, embedding) "
                    "VALUES (%s, %s, %s, %s, %s, %s::vector)",
                    [
                        (c.id, c.source, c.chunk_index, c.content, Jsonb(c.metadata), c.embedding)
                        for c in stored
                    ],
                )
        except psycopg.Error as e:
            logger.error("Chunk insert failed: %s", e)
            raise StoreError(f"Database error: {e}") from e
        return stored

    async def search(
        self,
        query_embedding: list[float],
        match_count: int,
        min_similarity: float,
        filter_source: str | None = None,
    ) -> list[MatchDocumentResult]:
        """Nearest chunks by cosine similarity, most similar first."""
        try:
            cur = await self._conn.execute(
                "SELECT id, content, metadata, source, chunk_index, similarity "
                "FROM match_documents(%s::vector, %s, %s, %s)",
                (query_embedding, match_count, min_similarity, filter_source),
            )
            rows = await cur.fetchall()
        except psycopg.Error as e:
            logger.error("Similarity search failed: %s", e)
            raise StoreError(f"Knowledge base search failed: {e}") from e
        return [
            MatchDocumentResult(
                id=r[0],
                content=r[1],
                metadata=r[2] or {},
                source=r[3],
                chunk_index=r[4],
                similarity=float(r[5]),
            )
            for r in rows
        ]
