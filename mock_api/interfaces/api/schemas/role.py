"""Role schemas."""

from pydantic import StrictBool

from .base import CamelModel


class RoleRead(CamelModel):
    id: str
    created_at: str
    updated_at: str
    name: str
    description: str
    is_default: bool


class RoleCreate(CamelModel):
    name: str | None = None
    description: str | None = None
    is_default: StrictBool | None = None


class RoleUpdate(CamelModel):
    name: str | None = None
    description: str | None = None
    is_default: StrictBool | None = None
