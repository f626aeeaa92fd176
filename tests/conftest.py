"""Pytest fixtures for ragdesk tests."""

import pytest

from ragdesk.application.dto.chunking_config import ChunkingConfig

from tests.fakes import (
    FakeChatProvider,
    FakeEmbeddingProvider,
    FakeUnitOfWork,
    make_uow_factory,
)


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork; "admin-1" is an admin, "user-1" is not."""
    uow = FakeUnitOfWork()
    uow.users.roles["admin-1"] = "admin"
    uow.users.roles["user-1"] = "user"
    return uow


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def embedding_provider() -> FakeEmbeddingProvider:
    return FakeEmbeddingProvider()


@pytest.fixture
def chat_provider() -> FakeChatProvider:
    return FakeChatProvider()


@pytest.fixture
def mock_role_checker():
    """AsyncMock for RoleChecker - grants every role by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.has_role.return_value = True
    return mock


@pytest.fixture
def chunking_config() -> ChunkingConfig:
    """Default chunking config for chunker tests."""
    return ChunkingConfig(chunk_size=100, chunk_overlap=20)
