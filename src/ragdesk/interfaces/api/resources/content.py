"""Site content API resource."""

import logging
from uuid import UUID

import falcon.asgi

from ragdesk.application.dto.content_dto import ContentUpsertInput
from ragdesk.application.use_cases.content.delete_content import DeleteContentUseCase
from ragdesk.application.use_cases.content.list_content import ListContentUseCase
from ragdesk.application.use_cases.content.upsert_content import UpsertContentUseCase
from ragdesk.domain.entities import SiteContent
from ragdesk.domain.exceptions import (
    NotFound,
    PermissionDenied,
    ProviderError,
    ValidationError,
)
from ragdesk.interfaces.api.payload import optional_str, read_json_object

logger = logging.getLogger(__name__)


class ContentResource:
    """GET/POST/DELETE /content - published content and admin upkeep."""

    def __init__(
        self,
        list_content: ListContentUseCase,
        upsert_content: UpsertContentUseCase,
        delete_content: DeleteContentUseCase,
    ) -> None:
        self._list_content = list_content
        self._upsert_content = upsert_content
        self._delete_content = delete_content

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List published content (?section=&key=)."""
        try:
            items = await self._list_content.execute(
                section=req.get_param("section"),
                key=req.get_param("key"),
            )
        except ProviderError as e:
            logger.error("Content fetch failed: %s", e)
            resp.status = e.status
            resp.media = {"error": str(e)}
            return
        resp.status = falcon.HTTP_200
        resp.media = [_content_to_dict(c) for c in items]

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Upsert content entry by (key, locale)."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = await read_json_object(req)
            published = body.get("published", True)
            if not isinstance(published, bool):
                raise ValidationError("published must be a boolean")
            result = await self._upsert_content.execute(
                user.user_id,
                ContentUpsertInput(
                    key=optional_str(body, "key"),
                    section=optional_str(body, "section"),
                    body=optional_str(body, "body"),
                    locale=optional_str(body, "locale") or "tr",
                    title=optional_str(body, "title"),
                    metadata=body.get("metadata"),
                    published=published,
                ),
            )
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Forbidden"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except ProviderError as e:
            logger.error("Content upsert failed: %s", e)
            resp.status = e.status
            resp.media = {"error": str(e)}
            return
        resp.status = falcon.HTTP_200
        resp.media = _content_to_dict(result)

    async def on_delete(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Delete content entry (?id=)."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        content_id_str = req.get_param("id")
        if not content_id_str:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Missing required parameter: id"}
            return
        try:
            content_id = UUID(content_id_str)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid id"}
            return

        try:
            await self._delete_content.execute(user.user_id, content_id)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Forbidden"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        except ProviderError as e:
            logger.error("Content delete failed: %s", e)
            resp.status = e.status
            resp.media = {"error": str(e)}
            return
        resp.status = falcon.HTTP_200
        resp.media = {"success": True, "message": f"Content {content_id} deleted"}


def _content_to_dict(c: SiteContent) -> dict:
    return {
        "id": str(c.id),
        "key": c.key,
        "locale": c.locale,
        "section": c.section,
        "title": c.title,
        "body": c.body,
        "metadata": c.metadata,
        "published": c.published,
        "created_at": c.created_at.isoformat(),
        "updated_at": c.updated_at.isoformat(),
    }
