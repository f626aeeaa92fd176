"""PostgreSQL user profile repository implementation."""

from uuid import UUID

import psycopg
from psycopg import AsyncConnection

from ragdesk.domain.exceptions import StoreError


class PostgresUserRepository:
    """Reads user profiles mirrored from the identity provider."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_role(self, user_id: str) -> str | None:
        """Role of the profile whose id is the token subject, or None.

        Subjects that are not UUIDs cannot have a profile.
        """
        try:
            profile_id = UUID(user_id)
        except ValueError:
            return None
        try:
            cur = await self._conn.execute(
                "SELECT role FROM users WHERE id = %s", (profile_id,)
            )
            row = await cur.fetchone()
        except psycopg.Error as e:
            raise StoreError(f"Profile lookup failed: {e}") from e
        return row[0] if row else None
