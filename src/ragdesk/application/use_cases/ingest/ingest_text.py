"""Ingest text use case."""

import logging

from ragdesk.application.dto.chunking_config import ChunkingConfig
from ragdesk.application.dto.ingest_dto import IngestInput, IngestResult
from ragdesk.application.ports import (
    Chunker,
    EmbeddingProvider,
    RoleChecker,
    UnitOfWorkFactory,
)
from ragdesk.domain.entities import DocumentChunk
from ragdesk.domain.exceptions import (
    EmbeddingProviderError,
    PermissionDenied,
    ValidationError,
)
from ragdesk.domain.value_objects import UserRole, coerce_metadata

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "manual_ingest"


class IngestTextUseCase:
    """Ingest text into the knowledge base: chunking, embedding, save.

    All chunks of one call are embedded in a single batch and inserted in a
    single unit of work, so either every chunk is stored or none is.
    Re-submitting the same text stores its chunks again.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        role_checker: RoleChecker,
        chunker: Chunker,
        embedding_provider: EmbeddingProvider,
        default_chunk_size: int = 1000,
        default_chunk_overlap: int = 200,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._role_checker = role_checker
        self._chunker = chunker
        self._embedding_provider = embedding_provider
        self._default_chunk_size = default_chunk_size
        self._default_chunk_overlap = default_chunk_overlap

    async def execute(self, user_id: str, input_data: IngestInput) -> IngestResult:
        """Chunk, embed and store text submitted by an administrator."""
        is_admin = await self._role_checker.has_role(user_id, UserRole.ADMIN)
        if not is_admin:
            raise PermissionDenied("Forbidden")

        text = (input_data.text or "").strip()
        if not text:
            raise ValidationError("Missing required field: text")

        source = (input_data.source or "").strip() or DEFAULT_SOURCE
        metadata = coerce_metadata(input_data.metadata)
        config = ChunkingConfig(
            chunk_size=input_data.chunk_size or self._default_chunk_size,
            chunk_overlap=(
                self._default_chunk_overlap
                if input_data.chunk_overlap is None
                else input_data.chunk_overlap
            ),
        )
        if config.chunk_size < 1:
            raise ValidationError("chunkSize must be a positive integer")
        if config.chunk_overlap < 0:
            raise ValidationError("chunkOverlap must be a non-negative integer")

        chunks_text = self._chunker.chunk(text, config)
        if not chunks_text:
            raise ValidationError("No valid content chunks generated")

        embeddings = await self._embedding_provider.embed(chunks_text)
        if len(embeddings) != len(chunks_text):
            raise EmbeddingProviderError("Partial failure in embedding generation")

        model = self._embedding_provider.model
        chunks = [
            DocumentChunk(
                content=content,
                source=source,
                chunk_index=i,
                embedding=embedding,
                metadata={**metadata, "model": model},
            )
            for i, (content, embedding) in enumerate(
                zip(chunks_text, embeddings, strict=True)
            )
        ]

        async with self._uow_factory() as uow:
            await uow.vectors.insert_chunks(chunks)

        logger.info("Ingested %d chunks from %s", len(chunks), source)
        return IngestResult(
            count=len(chunks),
            source=source,
            message=f"Successfully ingested {len(chunks)} chunks from {source}",
        )
