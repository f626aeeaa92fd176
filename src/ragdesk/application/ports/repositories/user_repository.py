"""User profile repository port."""

from typing import Protocol


class UserRepository(Protocol):
    """Port for reading user profiles."""

    async def get_role(self, user_id: str) -> str | None: ...
