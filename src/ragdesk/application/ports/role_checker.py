"""Role checker port - role based authorization."""

from typing import Protocol

from ragdesk.domain.value_objects import UserRole


class RoleChecker(Protocol):
    """Port for checking a user's profile role."""

    async def has_role(self, user_id: str, role: UserRole) -> bool: ...
