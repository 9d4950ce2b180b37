"""Helpers that keep exactly one role flagged as the default."""

from dataclasses import replace

from mock_api.infrastructure.repositories import RoleRepository


def clear_default_role(roles: RoleRepository) -> None:
    """Unset the flag on the current default role, if there is one.

    Callers must flag the replacement default inside the same transaction.
    """

    current = roles.get_default()
    if current is not None:
        roles.update(replace(current, is_default=False))
