"""Application ports - interfaces for external adapters."""

from ragdesk.application.ports.chat_provider import ChatProvider, TokenStream
from ragdesk.application.ports.chunker import Chunker
from ragdesk.application.ports.embedding_provider import EmbeddingProvider
from ragdesk.application.ports.role_checker import RoleChecker
from ragdesk.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "ChatProvider",
    "Chunker",
    "EmbeddingProvider",
    "RoleChecker",
    "TokenStream",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
