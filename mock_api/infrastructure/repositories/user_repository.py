"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from mock_api.domain.entities import User
from mock_api.domain.exceptions import NotFoundError
from mock_api.infrastructure.store import EntityStore

USER_NOT_FOUND = "User not found"


class UserRepository:
    """Provide CRUD operations for user entities held in the store."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    def list(self) -> Sequence[User]:
        return list(self.store.users)

    def list_by_role(self, role_id: str) -> Sequence[User]:
        return [user for user in self.store.users if user.role_id == role_id]

    def get(self, user_id: str) -> User | None:
        return next((user for user in self.store.users if user.id == user_id), None)

    def create(self, user: User) -> User:
        self.store.users.append(user)
        return user

    def update(self, user: User) -> User:
        index = self._index_of(user.id)
        self.store.users[index] = user
        return user

    def delete(self, user_id: str) -> User:
        index = self._index_of(user_id)
        return self.store.users.pop(index)

    def _index_of(self, user_id: str) -> int:
        for index, user in enumerate(self.store.users):
            if user.id == user_id:
                return index
        raise NotFoundError(USER_NOT_FOUND)


__all__ = ["USER_NOT_FOUND", "UserRepository"]
