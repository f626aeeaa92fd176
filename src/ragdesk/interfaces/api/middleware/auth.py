"""Auth middleware - resolves the caller from a bearer token."""

from dataclasses import dataclass

import falcon.asgi


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str
    email: str | None = None
    username: str | None = None


def get_bearer_token(auth: str | None) -> str | None:
    """Extract token from an ``Authorization: Bearer <token>`` header value."""
    if not auth:
        return None
    parts = auth.split(" ")
    if len(parts) == 2 and parts[0].lower() == "bearer" and parts[1]:
        return parts[1]
    return None


class AuthMiddleware:
    """Middleware that validates the bearer token and sets req.context.user.

    ``req.context.user`` is None for anonymous callers and invalid tokens;
    resources that need an identity answer 401 in that case.
    """

    def __init__(self, keycloak_provider=None) -> None:
        self._keycloak = keycloak_provider

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header."""
        req.context.user = None
        token = get_bearer_token(req.get_header("Authorization"))
        if not token or not self._keycloak:
            return
        user = await self._keycloak.decode_token(token)
        if user:
            req.context.user = RequestUser(
                user_id=user.user_id,
                email=user.email,
                username=user.username,
            )
