"""Use case for updating user information."""

from __future__ import annotations

from dataclasses import replace

from mock_api.domain.entities import User
from mock_api.domain.exceptions import NotFoundError
from mock_api.infrastructure.repositories import USER_NOT_FOUND, RoleRepository, UserRepository
from mock_api.infrastructure.store import EntityStore
from mock_api.utils import now_iso_timestamp

from .validators import ensure_role_exists


def update_user(
    store: EntityStore,
    user_id: str,
    *,
    first: str | None = None,
    last: str | None = None,
    role_id: str | None = None,
) -> User:
    """Apply a partial update to a user.

    Empty or missing values leave the matching field untouched, so a field
    cannot be cleared through this use case. ``updated_at`` only moves when
    at least one field actually changes.
    """

    with store.transaction():
        repository = UserRepository(store)
        current = repository.get(user_id)
        if current is None:
            raise NotFoundError(USER_NOT_FOUND)

        if role_id:
            ensure_role_exists(RoleRepository(store), role_id)

        changes: dict[str, str] = {}
        if first and first != current.first:
            changes["first"] = first
        if last and last != current.last:
            changes["last"] = last
        if role_id and role_id != current.role_id:
            changes["role_id"] = role_id

        if not changes:
            return current
        return repository.update(replace(current, updated_at=now_iso_timestamp(), **changes))
