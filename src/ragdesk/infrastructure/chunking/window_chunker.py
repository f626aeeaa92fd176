"""Sliding window text chunker implementation."""

from ragdesk.application.dto.chunking_config import ChunkingConfig


class SlidingWindowChunker:
    """Chunker using fixed-size character windows with overlap."""

    def chunk(self, text: str, config: ChunkingConfig) -> list[str]:
        """Split text into windows of chunk_size sharing chunk_overlap characters.

        The last window always ends at the end of the text. When the overlap
        would stop the cursor from advancing, the next window starts where
        the previous one ended.
        """
        size = config.chunk_size
        if size < 1:
            raise ValueError(f"chunk_size must be positive, got {size}")
        overlap = max(0, config.chunk_overlap)

        if not text:
            return []

        chunks: list[str] = []
        start = 0
        while start < len(text):
            end = min(start + size, len(text))
            chunks.append(text[start:end])
            if end == len(text):
                break
            start = end if overlap >= size else end - overlap
        return chunks
