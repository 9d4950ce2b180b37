"""Use case for listing roles."""

from typing import Any

from mock_api.application.query import ROLE_SEARCH_FIELDS, query_page
from mock_api.domain.entities import Page, Role
from mock_api.infrastructure.repositories import RoleRepository
from mock_api.infrastructure.store import EntityStore


def list_roles(
    store: EntityStore,
    *,
    search: str | None = None,
    page: Any = None,
    page_size: int,
) -> Page[Role]:
    """Return a page of roles matching ``search`` on name or description."""

    with store.transaction():
        roles = RoleRepository(store).list()
    return query_page(roles, ROLE_SEARCH_FIELDS, search, page, page_size=page_size)
