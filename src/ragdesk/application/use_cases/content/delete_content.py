"""Delete site content use case."""

from uuid import UUID

from ragdesk.application.ports import RoleChecker, UnitOfWorkFactory
from ragdesk.domain.exceptions import NotFound, PermissionDenied
from ragdesk.domain.value_objects import UserRole


class DeleteContentUseCase:
    """Remove a content entry by id. Admin only."""

    def __init__(
        self, unit_of_work_factory: UnitOfWorkFactory, role_checker: RoleChecker
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._role_checker = role_checker

    async def execute(self, user_id: str, content_id: UUID) -> None:
        if not await self._role_checker.has_role(user_id, UserRole.ADMIN):
            raise PermissionDenied("Forbidden")

        async with self._uow_factory() as uow:
            deleted = await uow.contents.delete(content_id)
        if not deleted:
            raise NotFound(f"Content {content_id} not found")
