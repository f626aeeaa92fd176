"""Site content repository port."""

from typing import Protocol
from uuid import UUID

from ragdesk.domain.entities import SiteContent


class SiteContentRepository(Protocol):
    """Port for site content persistence."""

    async def list_published(
        self, section: str | None = None, key: str | None = None
    ) -> list[SiteContent]: ...

    async def upsert(self, content: SiteContent) -> SiteContent: ...

    async def delete(self, content_id: UUID) -> bool: ...
