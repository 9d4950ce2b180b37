"""Use case for retrieving a single user."""

from mock_api.domain.entities import User
from mock_api.domain.exceptions import NotFoundError
from mock_api.infrastructure.repositories import USER_NOT_FOUND, UserRepository
from mock_api.infrastructure.store import EntityStore


def get_user(store: EntityStore, user_id: str) -> User:
    """Return the requested user or raise an error if it does not exist."""

    with store.transaction():
        user = UserRepository(store).get(user_id)
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return user
