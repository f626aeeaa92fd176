"""Lead repository port."""

from typing import Protocol

from ragdesk.domain.entities import Lead


class LeadRepository(Protocol):
    """Port for lead persistence."""

    async def create(self, lead: Lead) -> Lead: ...
