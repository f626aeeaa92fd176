"""Similarity search result projection."""

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID


@dataclass(frozen=True)
class MatchDocumentResult:
    """Chunk returned by similarity search, with its score."""

    id: UUID
    content: str
    source: str | None
    chunk_index: int
    similarity: float
    metadata: dict[str, Any] = field(default_factory=dict)
