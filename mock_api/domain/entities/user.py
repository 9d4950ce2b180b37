"""Domain entity representing a user."""

from dataclasses import dataclass


@dataclass
class User:
    """Core attributes describing a user listed by the API."""

    id: str
    created_at: str
    updated_at: str
    first: str
    last: str
    role_id: str
    photo: str | None = None


__all__ = ["User"]
