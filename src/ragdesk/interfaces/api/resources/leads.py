"""Lead capture API resource."""

import logging

import falcon.asgi

from ragdesk.application.dto.content_dto import LeadInput
from ragdesk.application.use_cases.leads.capture_lead import CaptureLeadUseCase
from ragdesk.domain.exceptions import ProviderError, ValidationError
from ragdesk.interfaces.api.payload import optional_str, read_json_object

logger = logging.getLogger(__name__)


class LeadsResource:
    """POST /leads - capture a landing page contact."""

    def __init__(self, capture_lead: CaptureLeadUseCase) -> None:
        self._capture_lead = capture_lead

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            body = await read_json_object(req)
            await self._capture_lead.execute(
                LeadInput(
                    email=optional_str(body, "email"),
                    name=optional_str(body, "name"),
                    source=optional_str(body, "source"),
                )
            )
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except ProviderError as e:
            logger.error("Lead capture failed: %s", e)
            resp.status = falcon.HTTP_500
            resp.media = {"error": "Failed to process lead"}
            return
        resp.status = falcon.HTTP_201
        resp.media = {"success": True}
