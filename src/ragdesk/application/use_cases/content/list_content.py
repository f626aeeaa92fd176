"""List site content use case."""

from ragdesk.application.ports import UnitOfWorkFactory
from ragdesk.domain.entities import SiteContent


class ListContentUseCase:
    """List published content, optionally narrowed by section and key."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self, section: str | None = None, key: str | None = None
    ) -> list[SiteContent]:
        async with self._uow_factory() as uow:
            return await uow.contents.list_published(section=section, key=key)
