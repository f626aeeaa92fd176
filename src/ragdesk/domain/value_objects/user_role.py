"""User role for authorization."""

from enum import StrEnum


class UserRole(StrEnum):
    """Roles stored on user profiles."""

    ADMIN = "admin"
    USER = "user"
