"""Use case for creating users."""

from __future__ import annotations

import random
import uuid

from mock_api.domain.entities import User
from mock_api.infrastructure.repositories import RoleRepository, UserRepository
from mock_api.infrastructure.store import EntityStore
from mock_api.utils import now_iso_timestamp

from .validators import ensure_required_fields, ensure_role_exists

PHOTO_URL_TEMPLATE = "https://i.pravatar.cc/400?img={index}"
PHOTO_COUNT = 70


def create_user(
    store: EntityStore,
    *,
    first: str | None,
    last: str | None,
    role_id: str | None,
    rng: random.Random | None = None,
) -> User:
    """Create a new user referencing an existing role."""

    ensure_required_fields({"first": first, "last": last, "roleId": role_id})

    source = rng or random
    with store.transaction():
        ensure_role_exists(RoleRepository(store), role_id)

        now = now_iso_timestamp()
        user = User(
            id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            first=first,
            last=last,
            role_id=role_id,
            photo=PHOTO_URL_TEMPLATE.format(index=source.randrange(PHOTO_COUNT)),
        )
        return UserRepository(store).create(user)
