"""Site content and lead DTOs."""

from dataclasses import dataclass


@dataclass
class ContentUpsertInput:
    """Input for creating or updating a content entry."""

    key: str | None
    section: str | None
    body: str | None
    locale: str = "tr"
    title: str | None = None
    metadata: object = None
    published: bool = True


@dataclass
class LeadInput:
    """Input for capturing a lead."""

    email: str | None
    name: str | None = None
    source: str | None = None
