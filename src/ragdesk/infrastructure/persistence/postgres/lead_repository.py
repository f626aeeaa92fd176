"""PostgreSQL lead repository implementation."""

import psycopg
from psycopg import AsyncConnection

from ragdesk.domain.entities import Lead
from ragdesk.domain.exceptions import StoreError


class PostgresLeadRepository:
    """Lead repository."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, lead: Lead) -> Lead:
        try:
            await self._conn.execute(
                "INSERT INTO lead (id, email, name, source, created_at) "
                "VALUES (%s, %s, %s, %s, %s)",
                (lead.id, lead.email, lead.name, lead.source, lead.created_at),
            )
        except psycopg.Error as e:
            raise StoreError(f"Failed to process lead: {e}") from e
        return lead
