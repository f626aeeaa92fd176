"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from ragdesk.application.use_cases.chat.answer_query import AnswerQueryUseCase
from ragdesk.application.use_cases.content.delete_content import DeleteContentUseCase
from ragdesk.application.use_cases.content.list_content import ListContentUseCase
from ragdesk.application.use_cases.content.upsert_content import UpsertContentUseCase
from ragdesk.application.use_cases.ingest.ingest_text import IngestTextUseCase
from ragdesk.application.use_cases.leads.capture_lead import CaptureLeadUseCase
from ragdesk.infrastructure.auth.role_checker import ProfileRoleChecker
from ragdesk.infrastructure.chunking.window_chunker import SlidingWindowChunker
from ragdesk.interfaces.api.app import create_app
from ragdesk.interfaces.api.middleware.auth import AuthMiddleware
from ragdesk.interfaces.api.resources.chat import ChatResource
from ragdesk.interfaces.api.resources.content import ContentResource
from ragdesk.interfaces.api.resources.health import HealthResource
from ragdesk.interfaces.api.resources.ingest import IngestResource
from ragdesk.interfaces.api.resources.leads import LeadsResource

from tests.fakes import FakeKeycloak

ADMIN = {"Authorization": "Bearer admin-token"}
USER = {"Authorization": "Bearer user-token"}


@pytest.fixture
def app(uow_factory, embedding_provider, chat_provider):
    """Falcon ASGI app wired with in-memory fakes."""
    role_checker = ProfileRoleChecker(uow_factory)
    ingest_text = IngestTextUseCase(
        unit_of_work_factory=uow_factory,
        role_checker=role_checker,
        chunker=SlidingWindowChunker(),
        embedding_provider=embedding_provider,
    )
    answer_query = AnswerQueryUseCase(
        unit_of_work_factory=uow_factory,
        embedding_provider=embedding_provider,
        chat_provider=chat_provider,
    )
    auth = AuthMiddleware(FakeKeycloak({"admin-token": "admin-1", "user-token": "user-1"}))
    return create_app(
        ingest_resource=IngestResource(ingest_text),
        chat_resource=ChatResource(answer_query, buffer_size=4),
        content_resource=ContentResource(
            ListContentUseCase(uow_factory),
            UpsertContentUseCase(uow_factory, role_checker),
            DeleteContentUseCase(uow_factory, role_checker),
        ),
        leads_resource=LeadsResource(CaptureLeadUseCase(uow_factory)),
        health_resource=HealthResource(uow_factory),
        middleware=[auth],
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
