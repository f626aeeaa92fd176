"""Unit of Work port - transactional boundary."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from ragdesk.application.ports.repositories import (
    LeadRepository,
    SiteContentRepository,
    UserRepository,
    VectorStore,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def vectors(self) -> VectorStore: ...

    @property
    def contents(self) -> SiteContentRepository: ...

    @property
    def leads(self) -> LeadRepository: ...

    @property
    def users(self) -> UserRepository: ...

    async def ping(self) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    def __call__(self) -> AbstractAsyncContextManager[UnitOfWork]: ...
