"""Repository implementations for infrastructure layer."""

from .role_repository import ROLE_NOT_FOUND, RoleRepository
from .user_repository import USER_NOT_FOUND, UserRepository

__all__ = ["ROLE_NOT_FOUND", "RoleRepository", "USER_NOT_FOUND", "UserRepository"]
