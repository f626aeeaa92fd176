"""Lifespan middleware - owns the pool and API client lifecycle."""

import logging
from typing import Any

from openai import AsyncOpenAI
from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


class ResourceLifespanMiddleware:
    """Opens the connection pool on startup; closes pool and clients on shutdown."""

    def __init__(
        self, pool: AsyncConnectionPool, openai_client: AsyncOpenAI | None = None
    ) -> None:
        self._pool = pool
        self._openai_client = openai_client

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pool when ASGI server starts."""
        await self._pool.open()
        logger.info("Database pool opened")

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Release pool and HTTP client when ASGI server shuts down."""
        await self._pool.close()
        if self._openai_client is not None:
            await self._openai_client.close()
        logger.info("Resources released")
