"""Persistence layer for roles data."""

from __future__ import annotations

from collections.abc import Sequence

from mock_api.domain.entities import Role
from mock_api.domain.exceptions import NotFoundError
from mock_api.infrastructure.store import EntityStore

ROLE_NOT_FOUND = "Role not found"


class RoleRepository:
    """Provide CRUD operations for role entities held in the store."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    def list(self) -> Sequence[Role]:
        return list(self.store.roles)

    def get(self, role_id: str) -> Role | None:
        return next((role for role in self.store.roles if role.id == role_id), None)

    def get_by_name(self, name: str) -> Role | None:
        """Return the role named exactly ``name`` (case-sensitive)."""

        return next((role for role in self.store.roles if role.name == name), None)

    def get_default(self) -> Role | None:
        return next((role for role in self.store.roles if role.is_default), None)

    def create(self, role: Role) -> Role:
        self.store.roles.append(role)
        return role

    def update(self, role: Role) -> Role:
        index = self._index_of(role.id)
        self.store.roles[index] = role
        return role

    def delete(self, role_id: str) -> Role:
        index = self._index_of(role_id)
        return self.store.roles.pop(index)

    def _index_of(self, role_id: str) -> int:
        for index, role in enumerate(self.store.roles):
            if role.id == role_id:
                return index
        raise NotFoundError(ROLE_NOT_FOUND)


__all__ = ["ROLE_NOT_FOUND", "RoleRepository"]
