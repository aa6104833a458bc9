from enum import Enum


class UserRole(str, Enum):
    """Role carried in access tokens."""

    USER = "user"
    MODERATOR = "moderator"
    ADMIN = "admin"
