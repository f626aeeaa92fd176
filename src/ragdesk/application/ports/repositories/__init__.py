"""Repository ports."""

from ragdesk.application.ports.repositories.lead_repository import LeadRepository
from ragdesk.application.ports.repositories.site_content_repository import (
    SiteContentRepository,
)
from ragdesk.application.ports.repositories.user_repository import UserRepository
from ragdesk.application.ports.repositories.vector_store import VectorStore

__all__ = [
    "LeadRepository",
    "SiteContentRepository",
    "UserRepository",
    "VectorStore",
]
