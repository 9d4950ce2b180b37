"""Domain entities exposed by the application."""

from .page import Page
from .role import Role
from .user import User

__all__ = ["Page", "Role", "User"]
