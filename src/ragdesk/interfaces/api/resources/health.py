"""Health check endpoints."""

import falcon.asgi

from ragdesk.domain.exceptions import StoreError


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, unit_of_work_factory=None) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /health/ready - readiness (database)."""
        if self._uow_factory is not None:
            try:
                async with self._uow_factory() as uow:
                    await uow.ping()
            except StoreError as e:
                resp.media = {"status": "unavailable", "error": str(e)}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
