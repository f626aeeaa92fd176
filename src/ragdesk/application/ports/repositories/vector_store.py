"""Vector store port - chunk persistence and similarity search."""

from typing import Protocol

from ragdesk.domain.entities import DocumentChunk, MatchDocumentResult


class VectorStore(Protocol):
    """Port for storing embedded chunks and searching them by similarity."""

    async def insert_chunks(self, chunks: list[DocumentChunk]) -> list[DocumentChunk]: ...

    async def search(
        self,
        query_embedding: list[float],
        match_count: int,
        min_similarity: float,
        filter_source: str | None = None,
    ) -> list[MatchDocumentResult]: ...
