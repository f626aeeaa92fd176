"""Site content entity - localized keyed content entry."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass
class SiteContent:
    """Content block keyed by (key, locale)."""

    id: UUID
    key: str
    locale: str
    section: str
    title: str | None
    body: str
    published: bool
    created_at: datetime
    updated_at: datetime
    metadata: dict[str, Any] = field(default_factory=dict)
