"""Common validation helpers for user use cases."""

from __future__ import annotations

from collections.abc import Mapping

from mock_api.domain.exceptions import InvalidReferenceError, ValidationError
from mock_api.infrastructure.repositories import RoleRepository

REFERENCED_ROLE_NOT_FOUND = "Referenced role not found"


def ensure_required_fields(fields: Mapping[str, object]) -> None:
    """Raise ``ValidationError`` naming every falsy entry of ``fields``.

    ``fields`` maps wire names to values; the order of the mapping is the
    order in which missing names are reported.
    """

    missing = [name for name, value in fields.items() if not value]
    if not missing:
        return
    plural = "s" if len(missing) > 1 else ""
    raise ValidationError(f"Missing required field{plural}: {', '.join(missing)}")


def ensure_role_exists(roles: RoleRepository, role_id: str) -> None:
    if roles.get(role_id) is None:
        raise InvalidReferenceError(REFERENCED_ROLE_NOT_FOUND)
