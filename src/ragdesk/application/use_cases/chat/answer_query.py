"""Answer query use case - retrieval augmented chat."""

import logging

from ragdesk.application.dto.chat_dto import ChatInput, ChatMessage
from ragdesk.application.ports import (
    ChatProvider,
    EmbeddingProvider,
    TokenStream,
    UnitOfWorkFactory,
)
from ragdesk.application.use_cases.chat.prompt import build_context, compose_system_prompt
from ragdesk.domain.exceptions import EmbeddingProviderError, ValidationError

logger = logging.getLogger(__name__)


class AnswerQueryUseCase:
    """Embed the query, fetch nearest chunks, stream a grounded completion."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        embedding_provider: EmbeddingProvider,
        chat_provider: ChatProvider,
        default_match_count: int = 6,
        default_min_similarity: float = 0.15,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._embedding_provider = embedding_provider
        self._chat_provider = chat_provider
        self._default_match_count = default_match_count
        self._default_min_similarity = default_min_similarity

    async def execute(self, input_data: ChatInput) -> TokenStream:
        """Return the token stream for the query.

        Everything up to the start of the completion happens before this
        returns, so failures there surface as exceptions rather than as a
        broken stream.
        """
        query = (input_data.query or "").strip()
        if not query:
            raise ValidationError("Missing required field: query")

        match_count = input_data.match_count or self._default_match_count
        min_similarity = (
            self._default_min_similarity
            if input_data.min_similarity is None
            else input_data.min_similarity
        )

        embeddings = await self._embedding_provider.embed([query])
        if not embeddings:
            raise EmbeddingProviderError("Failed to generate search embedding")

        async with self._uow_factory() as uow:
            matches = await uow.vectors.search(
                query_embedding=embeddings[0],
                match_count=match_count,
                min_similarity=min_similarity,
                filter_source=input_data.filter_source or None,
            )
        logger.info("Retrieved %d context chunks for query", len(matches))

        system_prompt = compose_system_prompt(
            input_data.system_prompt, build_context(matches)
        )
        return await self._chat_provider.stream(
            [
                ChatMessage(role="system", content=system_prompt),
                ChatMessage(role="user", content=query),
            ],
            temperature=0.0,
        )
