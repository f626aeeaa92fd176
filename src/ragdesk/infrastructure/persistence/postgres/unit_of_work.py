"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg_pool import AsyncConnectionPool

from ragdesk.domain.exceptions import StoreError
from ragdesk.infrastructure.persistence.postgres.lead_repository import (
    PostgresLeadRepository,
)
from ragdesk.infrastructure.persistence.postgres.site_content_repository import (
    PostgresSiteContentRepository,
)
from ragdesk.infrastructure.persistence.postgres.user_repository import (
    PostgresUserRepository,
)
from ragdesk.infrastructure.persistence.postgres.vector_store import (
    PostgresVectorStore,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        try:
            self._conn = await self._conn_cm.__aenter__()
        except psycopg.Error as e:
            raise StoreError(f"Database unavailable: {e}") from e
        self._vectors = PostgresVectorStore(self._conn)
        self._contents = PostgresSiteContentRepository(self._conn)
        self._leads = PostgresLeadRepository(self._conn)
        self._users = PostgresUserRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def vectors(self) -> PostgresVectorStore:
        return self._vectors

    @property
    def contents(self) -> PostgresSiteContentRepository:
        return self._contents

    @property
    def leads(self) -> PostgresLeadRepository:
        return self._leads

    @property
    def users(self) -> PostgresUserRepository:
        return self._users

    async def ping(self) -> None:
        """Round trip to the database."""
        try:
            await self._conn.execute("SELECT 1")
        except psycopg.Error as e:
            raise StoreError(f"Database unavailable: {e}") from e

    async def commit(self) -> None:
        if self._conn:
            try:
                await self._conn.commit()
            except psycopg.Error as e:
                raise StoreError(f"Database error: {e}") from e

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
