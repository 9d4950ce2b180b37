"""Use case for listing users."""

from typing import Any

from mock_api.application.query import USER_SEARCH_FIELDS, query_page
from mock_api.domain.entities import Page, User
from mock_api.infrastructure.repositories import UserRepository
from mock_api.infrastructure.store import EntityStore


def list_users(
    store: EntityStore,
    *,
    search: str | None = None,
    page: Any = None,
    page_size: int,
) -> Page[User]:
    """Return a page of users matching ``search`` on first or last name."""

    with store.transaction():
        users = UserRepository(store).list()
    return query_page(users, USER_SEARCH_FIELDS, search, page, page_size=page_size)
