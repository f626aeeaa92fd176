"""PostgreSQL site content repository implementation."""

from uuid import UUID

import psycopg
from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from ragdesk.domain.entities import SiteContent
from ragdesk.domain.exceptions import StoreError

_COLUMNS = "id, key, locale, section, title, body, metadata, published, created_at, updated_at"


def _row_to_content(r: tuple) -> SiteContent:
    return SiteContent(
        id=r[0],
        key=r[1],
        locale=r[2],
        section=r[3],
        title=r[4],
        body=r[5],
        metadata=r[6] or {},
        published=r[7],
        created_at=r[8],
        updated_at=r[9],
    )


class PostgresSiteContentRepository:
    """Site content repository keyed by (key, locale)."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_published(
        self, section: str | None = None, key: str | None = None
    ) -> list[SiteContent]:
        """List published entries with optional section/key filters."""
        conditions = ["published = true"]
        params: list[object] = []
        if section:
            conditions.append("section = %s")
            params.append(section)
        if key:
            conditions.append("key = %s")
            params.append(key)
        try:
            cur = await self._conn.execute(
                f"SELECT {_COLUMNS} FROM site_content WHERE {' AND '.join(conditions)} "
                "ORDER BY section, key, locale",
                params,
            )
            rows = await cur.fetchall()
        except psycopg.Error as e:
            raise StoreError(f"Failed to fetch content: {e}") from e
        return [_row_to_content(r) for r in rows]

    async def upsert(self, content: SiteContent) -> SiteContent:
        """Insert or update on (key, locale); created_at and id are kept on update."""
        try:
            cur = await self._conn.execute(
                f"""
                INSERT INTO site_content ({_COLUMNS})
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                ON CONFLICT (key, locale) DO UPDATE SET
                    section = EXCLUDED.section,
                    title = EXCLUDED.title,
                    body = EXCLUDED.body,
                    metadata = EXCLUDED.metadata,
                    published = EXCLUDED.published,
                    updated_at = EXCLUDED.updated_at
                RETURNING {_COLUMNS}
                """,
                (
                    content.id,
                    content.key,
                    content.locale,
                    content.section,
                    content.title,
                    content.body,
                    Jsonb(content.metadata),
                    content.published,
                    content.created_at,
                    content.updated_at,
                ),
            )
            row = await cur.fetchone()
        except psycopg.Error as e:
            raise StoreError(f"Database upsert failed: {e}") from e
        return _row_to_content(row)

    async def delete(self, content_id: UUID) -> bool:
        """Delete entry; returns False when nothing matched."""
        try:
            cur = await self._conn.execute(
                "DELETE FROM site_content WHERE id = %s", (content_id,)
            )
        except psycopg.Error as e:
            raise StoreError(f"Failed to delete content: {e}") from e
        return cur.rowcount > 0
