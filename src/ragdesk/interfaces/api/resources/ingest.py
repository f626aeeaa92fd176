"""Ingestion API resource."""

import logging

import falcon.asgi

from ragdesk.application.dto.ingest_dto import IngestInput
from ragdesk.application.use_cases.ingest.ingest_text import IngestTextUseCase
from ragdesk.domain.exceptions import PermissionDenied, ProviderError, ValidationError
from ragdesk.interfaces.api.payload import (
    optional_int,
    optional_str,
    read_json_object,
)

logger = logging.getLogger(__name__)


class IngestResource:
    """POST /ingest - chunk, embed and store text (admin only)."""

    def __init__(self, ingest_text: IngestTextUseCase) -> None:
        self._ingest_text = ingest_text

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Ingest text into the knowledge base."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = await read_json_object(req)
            input_data = IngestInput(
                text=optional_str(body, "text") or "",
                source=optional_str(body, "source"),
                metadata=body.get("metadata"),
                chunk_size=optional_int(body, "chunkSize", minimum=0),
                chunk_overlap=optional_int(body, "chunkOverlap", minimum=0),
            )
            result = await self._ingest_text.execute(user.user_id, input_data)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Forbidden"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except ProviderError as e:
            logger.error("Ingestion failed: %s", e)
            resp.status = e.status
            resp.media = {"error": str(e)}
            return

        resp.status = falcon.HTTP_201
        resp.media = {
            "success": True,
            "count": result.count,
            "message": result.message,
        }
