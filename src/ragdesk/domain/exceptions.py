"""Domain exceptions."""


class RagDeskError(Exception):
    """Base exception for ragdesk."""

    pass


class ValidationError(RagDeskError):
    """Validation failed for input data."""

    pass


class AuthorizationError(RagDeskError):
    """Caller could not be authorized."""

    pass


class Unauthorized(AuthorizationError):
    """Missing or invalid credential."""

    pass


class PermissionDenied(AuthorizationError):
    """User does not have the role required for the requested action."""

    pass


class NotFound(RagDeskError):
    """Requested resource was not found."""

    pass


class ProviderError(RagDeskError):
    """Failure surfaced by an external dependency.

    ``status`` carries the provider's own HTTP status when it reported one.
    """

    def __init__(self, message: str, status: int = 500) -> None:
        super().__init__(message)
        self.status = status


class EmbeddingProviderError(ProviderError):
    """Embedding API failed or returned an unusable result."""

    pass


class StoreError(ProviderError):
    """Vector store / database operation failed."""

    pass


class ChatProviderError(ProviderError):
    """Chat completion API failed before streaming started."""

    pass


class StreamingError(RagDeskError):
    """Upstream failed after the response stream had already started."""

    pass
