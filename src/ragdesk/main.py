"""Application entry point and composition root."""

import logging

from openai import AsyncOpenAI

from ragdesk import __version__
from ragdesk.application.use_cases.chat.answer_query import AnswerQueryUseCase
from ragdesk.application.use_cases.content.delete_content import DeleteContentUseCase
from ragdesk.application.use_cases.content.list_content import ListContentUseCase
from ragdesk.application.use_cases.content.upsert_content import UpsertContentUseCase
from ragdesk.application.use_cases.ingest.ingest_text import IngestTextUseCase
from ragdesk.application.use_cases.leads.capture_lead import CaptureLeadUseCase
from ragdesk.config import Settings, get_settings
from ragdesk.infrastructure.auth.keycloak_provider import KeycloakProvider
from ragdesk.infrastructure.auth.role_checker import ProfileRoleChecker
from ragdesk.infrastructure.chat.openai_chat_provider import OpenAIChatProvider
from ragdesk.infrastructure.chunking.window_chunker import SlidingWindowChunker
from ragdesk.infrastructure.embedding.openai_provider import OpenAIEmbeddingProvider
from ragdesk.infrastructure.persistence.postgres.connection import create_pool
from ragdesk.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from ragdesk.interfaces.api.app import create_app
from ragdesk.interfaces.api.middleware.auth import AuthMiddleware
from ragdesk.interfaces.api.middleware.cors import CORSMiddleware
from ragdesk.interfaces.api.middleware.lifespan import ResourceLifespanMiddleware
from ragdesk.interfaces.api.resources.chat import ChatResource
from ragdesk.interfaces.api.resources.content import ContentResource
from ragdesk.interfaces.api.resources.health import HealthResource
from ragdesk.interfaces.api.resources.ingest import IngestResource
from ragdesk.interfaces.api.resources.leads import LeadsResource
from ragdesk.interfaces.api.streaming import DisconnectWatcher
from ragdesk.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_ragdesk_app(settings: Settings | None = None) -> DisconnectWatcher:
    """Composition root - build the Falcon app with all dependencies.

    The app is wrapped in DisconnectWatcher so streamed chat responses stop
    pulling from the model when the client goes away.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    pool = create_pool(settings.database_url)
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("KEYCLOAK_CLIENT_SECRET not set; all callers are anonymous")

    openai_client = AsyncOpenAI(
        base_url=settings.openai_api_url,
        api_key=settings.openai_api_key or "no-key-provided",
    )
    embedding_provider = OpenAIEmbeddingProvider(openai_client, settings.embedding_model)
    chat_provider = OpenAIChatProvider(openai_client, settings.chat_model)
    role_checker = ProfileRoleChecker(uow_factory)

    ingest_text = IngestTextUseCase(
        unit_of_work_factory=uow_factory,
        role_checker=role_checker,
        chunker=SlidingWindowChunker(),
        embedding_provider=embedding_provider,
        default_chunk_size=settings.default_chunk_size,
        default_chunk_overlap=settings.default_chunk_overlap,
    )
    answer_query = AnswerQueryUseCase(
        unit_of_work_factory=uow_factory,
        embedding_provider=embedding_provider,
        chat_provider=chat_provider,
        default_match_count=settings.default_match_count,
        default_min_similarity=settings.default_min_similarity,
    )

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    app = create_app(
        ingest_resource=IngestResource(ingest_text),
        chat_resource=ChatResource(answer_query, buffer_size=settings.stream_buffer_size),
        content_resource=ContentResource(
            ListContentUseCase(uow_factory),
            UpsertContentUseCase(uow_factory, role_checker),
            DeleteContentUseCase(uow_factory, role_checker),
        ),
        leads_resource=LeadsResource(CaptureLeadUseCase(uow_factory)),
        health_resource=HealthResource(uow_factory),
        middleware=[
            CORSMiddleware(cors_origins),
            ResourceLifespanMiddleware(pool, openai_client),
            AuthMiddleware(keycloak),
        ],
    )
    return DisconnectWatcher(app)


def main() -> None:
    """CLI entry point - serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    app = create_ragdesk_app(settings)
    logger.info("ragdesk v%s listening on %s:%d", __version__, settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
