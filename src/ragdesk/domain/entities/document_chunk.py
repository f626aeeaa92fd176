"""Document chunk entity - stored unit of ingested knowledge."""

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID


@dataclass(frozen=True)
class DocumentChunk:
    """Chunk of a source document with its embedding.

    ``id`` is None until the chunk has been persisted.
    """

    content: str
    source: str
    chunk_index: int
    embedding: list[float]
    metadata: dict[str, Any] = field(default_factory=dict)
    id: UUID | None = None
