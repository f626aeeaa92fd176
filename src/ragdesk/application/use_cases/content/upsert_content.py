"""Upsert site content use case."""

from datetime import UTC, datetime
from uuid import uuid4

from ragdesk.application.dto.content_dto import ContentUpsertInput
from ragdesk.application.ports import RoleChecker, UnitOfWorkFactory
from ragdesk.domain.entities import SiteContent
from ragdesk.domain.exceptions import PermissionDenied, ValidationError
from ragdesk.domain.value_objects import UserRole, coerce_metadata


class UpsertContentUseCase:
    """Create or replace the content entry for (key, locale). Admin only."""

    def __init__(
        self, unit_of_work_factory: UnitOfWorkFactory, role_checker: RoleChecker
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._role_checker = role_checker

    async def execute(self, user_id: str, input_data: ContentUpsertInput) -> SiteContent:
        """Upsert content entry."""
        if not await self._role_checker.has_role(user_id, UserRole.ADMIN):
            raise PermissionDenied("Forbidden")

        if not input_data.key or not input_data.section or not input_data.body:
            raise ValidationError("Missing required fields: key, section, body")

        now = datetime.now(UTC)
        content = SiteContent(
            id=uuid4(),
            key=input_data.key,
            locale=input_data.locale or "tr",
            section=input_data.section,
            title=input_data.title,
            body=input_data.body,
            published=bool(input_data.published),
            created_at=now,
            updated_at=now,
            metadata=coerce_metadata(input_data.metadata),
        )
        async with self._uow_factory() as uow:
            return await uow.contents.upsert(content)
