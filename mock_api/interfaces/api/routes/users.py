"""Routes to browse and edit users."""

import random

from fastapi import APIRouter, Depends, Query

from mock_api.application.use_cases.users import (
    create_user as create_user_uc,
    delete_user as delete_user_uc,
    get_user as get_user_uc,
    list_users as list_users_uc,
    update_user as update_user_uc,
)
from mock_api.config import Settings
from mock_api.domain.entities import User
from mock_api.domain.exceptions import DomainError
from mock_api.infrastructure.store import EntityStore
from mock_api.interfaces.api.dependencies import get_app_settings, get_rng, get_store
from mock_api.interfaces.api.routes_helpers import to_http_exception, to_page_model
from mock_api.interfaces.api.schemas import (
    MessageRead,
    PageRead,
    UserCreate,
    UserRead,
    UserUpdate,
)

router = APIRouter(prefix="/users", tags=["users"])

_ERROR_RESPONSES = {400: {"model": MessageRead}, 404: {"model": MessageRead}}


def _to_read_model(user: User) -> UserRead:
    return UserRead.model_validate(user)


@router.get("", response_model=PageRead[UserRead])
def list_users(
    search: str | None = Query(None, description="Case-insensitive match on first or last name"),
    page: str | None = Query(None, description="1-based page number; invalid values mean 1"),
    store: EntityStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    """Return one page of users, newest first."""

    result = list_users_uc(store, search=search, page=page, page_size=settings.page_size)
    return to_page_model(result, UserRead)


@router.get("/{user_id}", response_model=UserRead, responses=_ERROR_RESPONSES)
def read_user(user_id: str, store: EntityStore = Depends(get_store)):
    try:
        user = get_user_uc(store, user_id)
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(user)


@router.patch("/{user_id}", response_model=UserRead, responses=_ERROR_RESPONSES)
def update_user(
    user_id: str,
    user_in: UserUpdate | None = None,
    store: EntityStore = Depends(get_store),
):
    """Update first name, last name or role; empty values are ignored."""

    user_in = user_in or UserUpdate()
    try:
        user = update_user_uc(
            store,
            user_id,
            first=user_in.first,
            last=user_in.last,
            role_id=user_in.role_id,
        )
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(user)


@router.post("", response_model=UserRead, responses=_ERROR_RESPONSES)
def register_user(
    user_in: UserCreate | None = None,
    store: EntityStore = Depends(get_store),
    rng: random.Random = Depends(get_rng),
):
    user_in = user_in or UserCreate()
    try:
        user = create_user_uc(
            store,
            first=user_in.first,
            last=user_in.last,
            role_id=user_in.role_id,
            rng=rng,
        )
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(user)


@router.delete("/{user_id}", response_model=UserRead, responses=_ERROR_RESPONSES)
def delete_user(user_id: str, store: EntityStore = Depends(get_store)):
    """Delete the user and return it."""

    try:
        user = delete_user_uc(store, user_id)
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(user)
