"""Use case for updating roles."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from mock_api.domain.entities import Role
from mock_api.domain.exceptions import ConflictError, NotFoundError
from mock_api.infrastructure.repositories import ROLE_NOT_FOUND, RoleRepository
from mock_api.infrastructure.store import EntityStore
from mock_api.utils import now_iso_timestamp

from .default_role import clear_default_role
from .validators import ensure_unique_role_name

logger = logging.getLogger(__name__)

CANNOT_UNSET_DEFAULT = "Cannot unset default role"


def update_role(
    store: EntityStore,
    role_id: str,
    *,
    name: str | None = None,
    description: str | None = None,
    is_default: bool | None = None,
) -> Role:
    """Apply a partial update to a role.

    The default flag can only move to another role; unsetting it on the
    current default is rejected. Every check runs before anything is
    written, so a rejected update leaves the store unchanged.
    """

    with store.transaction():
        repository = RoleRepository(store)
        current = repository.get(role_id)
        if current is None:
            raise NotFoundError(ROLE_NOT_FOUND)

        if name:
            ensure_unique_role_name(repository, name, exclude_role_id=role_id)

        becomes_default = False
        if is_default is not None and is_default != current.is_default:
            if is_default is False:
                raise ConflictError(CANNOT_UNSET_DEFAULT)
            becomes_default = True

        changes: dict[str, Any] = {}
        if name and name != current.name:
            changes["name"] = name
        if description and description != current.description:
            changes["description"] = description

        if becomes_default:
            clear_default_role(repository)
            changes["is_default"] = True

        if not changes:
            return current
        updated = repository.update(replace(current, updated_at=now_iso_timestamp(), **changes))

    if becomes_default:
        logger.info("Role %s is now the default role", updated.id)
    return updated
