"""Chat DTOs."""

from dataclasses import dataclass


@dataclass
class ChatInput:
    """Input for a grounded chat answer."""

    query: str
    match_count: int | None = None
    min_similarity: float | None = None
    filter_source: str | None = None
    system_prompt: str | None = None


@dataclass
class ChatMessage:
    """One message sent to the chat provider."""

    role: str
    content: str
