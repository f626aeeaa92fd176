"""Domain entities."""

from ragdesk.domain.entities.document_chunk import DocumentChunk
from ragdesk.domain.entities.lead import Lead
from ragdesk.domain.entities.match import MatchDocumentResult
from ragdesk.domain.entities.site_content import SiteContent

__all__ = [
    "DocumentChunk",
    "Lead",
    "MatchDocumentResult",
    "SiteContent",
]
