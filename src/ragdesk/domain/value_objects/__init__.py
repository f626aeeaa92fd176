"""Domain value objects."""

from ragdesk.domain.value_objects.metadata import Metadata, coerce_metadata
from ragdesk.domain.value_objects.user_role import UserRole

__all__ = [
    "Metadata",
    "UserRole",
    "coerce_metadata",
]
