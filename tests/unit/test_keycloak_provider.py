"""Unit tests for KeycloakProvider with a mocked Keycloak client."""

from unittest.mock import AsyncMock

import pytest
from keycloak.exceptions import KeycloakError

from ragdesk.infrastructure.auth.keycloak_provider import KeycloakProvider


@pytest.fixture
def provider() -> KeycloakProvider:
    provider = KeycloakProvider(
        server_url="http://keycloak.test",
        realm="ragdesk",
        client_id="ragdesk-api",
        client_secret="secret",
    )
    provider._keycloak.a_introspect = AsyncMock()
    return provider


@pytest.mark.asyncio
async def test_active_token_returns_user(provider: KeycloakProvider) -> None:
    provider._keycloak.a_introspect.return_value = {
        "active": True,
        "sub": "3f1c2a9e-0000-4000-8000-000000000001",
        "email": "admin@example.com",
        "preferred_username": "admin",
    }

    user = await provider.decode_token("good-token")

    assert user is not None
    assert user.user_id == "3f1c2a9e-0000-4000-8000-000000000001"
    assert user.email == "admin@example.com"
    assert user.username == "admin"
    assert not hasattr(user, "realm_roles")
    provider._keycloak.a_introspect.assert_awaited_once_with("good-token")


@pytest.mark.asyncio
async def test_inactive_token_returns_none(provider: KeycloakProvider) -> None:
    provider._keycloak.a_introspect.return_value = {"active": False}
    assert await provider.decode_token("expired") is None


@pytest.mark.asyncio
async def test_token_without_subject_returns_none(provider: KeycloakProvider) -> None:
    provider._keycloak.a_introspect.return_value = {"active": True}
    assert await provider.decode_token("no-sub") is None


@pytest.mark.asyncio
async def test_keycloak_error_returns_none(provider: KeycloakProvider) -> None:
    provider._keycloak.a_introspect.side_effect = KeycloakError(
        error_message="Connection refused", response_code=503
    )
    assert await provider.decode_token("any") is None
