"""Use case for creating roles."""

from __future__ import annotations

import logging
import uuid

from mock_api.domain.entities import Role
from mock_api.domain.exceptions import ValidationError
from mock_api.infrastructure.repositories import RoleRepository
from mock_api.infrastructure.store import EntityStore
from mock_api.utils import now_iso_timestamp

from .default_role import clear_default_role
from .validators import ensure_unique_role_name

logger = logging.getLogger(__name__)


def create_role(
    store: EntityStore,
    *,
    name: str | None,
    description: str | None = None,
    is_default: bool | None = None,
) -> Role:
    """Create a role with a unique name, optionally making it the default."""

    if not name:
        raise ValidationError("Missing required field: name")

    with store.transaction():
        repository = RoleRepository(store)
        ensure_unique_role_name(repository, name)

        make_default = is_default is True
        if make_default:
            clear_default_role(repository)

        now = now_iso_timestamp()
        role = Role(
            id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            name=name,
            description=description or "",
            is_default=make_default,
        )
        repository.create(role)

    if make_default:
        logger.info("Role %s is now the default role", role.id)
    return role
