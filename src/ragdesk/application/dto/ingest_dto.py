"""Ingestion DTOs."""

from dataclasses import dataclass


@dataclass
class IngestInput:
    """Input for ingesting a block of text."""

    text: str
    source: str | None = None
    metadata: object = None  # validated by coerce_metadata
    chunk_size: int | None = None
    chunk_overlap: int | None = None


@dataclass
class IngestResult:
    """Outcome of a successful ingestion."""

    count: int
    source: str
    message: str
