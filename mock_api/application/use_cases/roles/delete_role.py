"""Use case for deleting a role."""

import logging
from dataclasses import replace

from mock_api.domain.entities import Role
from mock_api.domain.exceptions import ConflictError, NotFoundError
from mock_api.infrastructure.repositories import ROLE_NOT_FOUND, RoleRepository, UserRepository
from mock_api.infrastructure.store import EntityStore

logger = logging.getLogger(__name__)

CANNOT_DELETE_DEFAULT = "Cannot delete default role"


def delete_role(store: EntityStore, role_id: str) -> Role:
    """Remove a role, moving its users to the default role first."""

    with store.transaction():
        roles = RoleRepository(store)
        role = roles.get(role_id)
        if role is None:
            raise NotFoundError(ROLE_NOT_FOUND)
        if role.is_default:
            raise ConflictError(CANNOT_DELETE_DEFAULT)

        default_role = roles.get_default()
        if default_role is None:  # pragma: no cover - the store always holds a default
            raise ConflictError(CANNOT_DELETE_DEFAULT)

        users = UserRepository(store)
        reassigned = users.list_by_role(role.id)
        for user in reassigned:
            users.update(replace(user, role_id=default_role.id))
        roles.delete(role.id)

    logger.info(
        "Deleted role %s and moved %d users to role %s",
        role.id,
        len(reassigned),
        default_role.id,
    )
    return role
