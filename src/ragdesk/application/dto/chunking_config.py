"""Chunking configuration DTO."""

from dataclasses import dataclass


@dataclass
class ChunkingConfig:
    """Configuration for text chunking."""

    chunk_size: int
    chunk_overlap: int
