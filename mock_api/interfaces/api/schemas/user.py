"""User schemas."""

from .base import CamelModel


class UserRead(CamelModel):
    id: str
    created_at: str
    updated_at: str
    first: str
    last: str
    role_id: str
    photo: str | None = None


class UserCreate(CamelModel):
    """Body of ``POST /users``; presence is checked by the use case."""

    first: str | None = None
    last: str | None = None
    role_id: str | None = None


class UserUpdate(CamelModel):
    first: str | None = None
    last: str | None = None
    role_id: str | None = None
