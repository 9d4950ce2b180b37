"""Use case for deleting a user."""

import logging

from mock_api.domain.entities import User
from mock_api.domain.exceptions import NotFoundError
from mock_api.infrastructure.repositories import USER_NOT_FOUND, UserRepository
from mock_api.infrastructure.store import EntityStore

logger = logging.getLogger(__name__)


def delete_user(store: EntityStore, user_id: str) -> User:
    """Remove the specified user and return it."""

    with store.transaction():
        repository = UserRepository(store)
        if repository.get(user_id) is None:
            raise NotFoundError(USER_NOT_FOUND)
        user = repository.delete(user_id)
    logger.info("Deleted user %s", user.id)
    return user
