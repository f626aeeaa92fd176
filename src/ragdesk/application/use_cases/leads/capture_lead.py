"""Capture lead use case."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from ragdesk.application.dto.content_dto import LeadInput
from ragdesk.application.ports import UnitOfWorkFactory
from ragdesk.domain.entities import Lead
from ragdesk.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


class CaptureLeadUseCase:
    """Store a contact submitted from the landing page."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, input_data: LeadInput) -> Lead:
        email = (input_data.email or "").strip()
        if not email:
            raise ValidationError("Email is required")

        lead = Lead(
            id=uuid4(),
            email=email,
            name=input_data.name or "N/A",
            source=input_data.source or "landing_page",
            created_at=datetime.now(UTC),
        )
        async with self._uow_factory() as uow:
            created = await uow.leads.create(lead)
        logger.info("Captured lead from %s", lead.source)
        return created
