"""Lead entity - captured marketing contact."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Lead:
    """Contact captured from a landing page form."""

    id: UUID
    email: str
    name: str
    source: str
    created_at: datetime
