"""Chat API resource - streamed grounded answers."""

import logging

import falcon.asgi

from ragdesk.application.dto.chat_dto import ChatInput
from ragdesk.application.use_cases.chat.answer_query import AnswerQueryUseCase
from ragdesk.domain.exceptions import ProviderError, ValidationError
from ragdesk.interfaces.api.payload import (
    optional_float,
    optional_int,
    optional_str,
    read_json_object,
)
from ragdesk.interfaces.api.streaming import DISCONNECT_EVENT_KEY, TokenRelay

logger = logging.getLogger(__name__)


class ChatResource:
    """POST /chat - retrieve context and stream the completion as plain text."""

    def __init__(self, answer_query: AnswerQueryUseCase, buffer_size: int = 32) -> None:
        self._answer_query = answer_query
        self._buffer_size = buffer_size

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Answer query; errors before the first token are JSON responses."""
        try:
            body = await read_json_object(req)
            input_data = ChatInput(
                query=optional_str(body, "query") or "",
                match_count=optional_int(body, "matchCount", minimum=1),
                min_similarity=optional_float(body, "minSimilarity", 0.0, 1.0),
                filter_source=optional_str(body, "filterSource"),
                system_prompt=optional_str(body, "systemPrompt"),
            )
            tokens = await self._answer_query.execute(input_data)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except ProviderError as e:
            logger.error("Chat failed: %s", e)
            resp.status = e.status
            resp.media = {"error": str(e)}
            return

        resp.status = falcon.HTTP_200
        resp.content_type = "text/plain; charset=utf-8"
        resp.set_header("Cache-Control", "no-cache, no-transform")
        resp.set_header("Connection", "keep-alive")
        resp.stream = TokenRelay(
            tokens,
            buffer_size=self._buffer_size,
            disconnected=req.scope.get(DISCONNECT_EVENT_KEY),
        )
