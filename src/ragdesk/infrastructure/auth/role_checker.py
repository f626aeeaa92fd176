"""Role checker implementation - reads role from the user profile table."""

from ragdesk.application.ports import UnitOfWorkFactory
from ragdesk.domain.value_objects import UserRole


class ProfileRoleChecker:
    """Checks the ``role`` column of the caller's profile."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def has_role(self, user_id: str, role: UserRole) -> bool:
        """Users without a profile have no role."""
        async with self._uow_factory() as uow:
            current = await uow.users.get_role(user_id)
        return current == role.value
