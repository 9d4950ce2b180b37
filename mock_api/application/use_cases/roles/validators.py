"""Common validation helpers for role use cases."""

from __future__ import annotations

from mock_api.domain.exceptions import ConflictError
from mock_api.infrastructure.repositories import RoleRepository

ROLE_NAME_TAKEN = "Role with given name already exists"


def ensure_unique_role_name(
    roles: RoleRepository, name: str, *, exclude_role_id: str | None = None
) -> None:
    """Raise ``ConflictError`` when another role is already named ``name``."""

    existing = roles.get_by_name(name)
    if existing is not None and existing.id != exclude_role_id:
        raise ConflictError(ROLE_NAME_TAKEN)
