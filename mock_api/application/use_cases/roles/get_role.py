"""Use case for retrieving a single role."""

from mock_api.domain.entities import Role
from mock_api.domain.exceptions import NotFoundError
from mock_api.infrastructure.repositories import ROLE_NOT_FOUND, RoleRepository
from mock_api.infrastructure.store import EntityStore


def get_role(store: EntityStore, role_id: str) -> Role:
    """Return the requested role or raise an error if it does not exist."""

    with store.transaction():
        role = RoleRepository(store).get(role_id)
    if role is None:
        raise NotFoundError(ROLE_NOT_FOUND)
    return role
