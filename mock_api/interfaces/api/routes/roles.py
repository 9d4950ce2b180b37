"""Routes to browse and edit roles."""

from fastapi import APIRouter, Depends, Query

from mock_api.application.use_cases.roles import (
    create_role as create_role_uc,
    delete_role as delete_role_uc,
    get_role as get_role_uc,
    list_roles as list_roles_uc,
    update_role as update_role_uc,
)
from mock_api.config import Settings
from mock_api.domain.entities import Role
from mock_api.domain.exceptions import DomainError
from mock_api.infrastructure.store import EntityStore
from mock_api.interfaces.api.dependencies import get_app_settings, get_store
from mock_api.interfaces.api.routes_helpers import to_http_exception, to_page_model
from mock_api.interfaces.api.schemas import (
    MessageRead,
    PageRead,
    RoleCreate,
    RoleRead,
    RoleUpdate,
)

router = APIRouter(prefix="/roles", tags=["roles"])

_ERROR_RESPONSES = {400: {"model": MessageRead}, 404: {"model": MessageRead}}


def _to_read_model(role: Role) -> RoleRead:
    return RoleRead.model_validate(role)


@router.get("", response_model=PageRead[RoleRead])
def list_roles(
    search: str | None = Query(None, description="Case-insensitive match on name or description"),
    page: str | None = Query(None, description="1-based page number; invalid values mean 1"),
    store: EntityStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    result = list_roles_uc(store, search=search, page=page, page_size=settings.page_size)
    return to_page_model(result, RoleRead)


@router.get("/{role_id}", response_model=RoleRead, responses=_ERROR_RESPONSES)
def read_role(role_id: str, store: EntityStore = Depends(get_store)):
    try:
        role = get_role_uc(store, role_id)
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(role)


@router.patch("/{role_id}", response_model=RoleRead, responses=_ERROR_RESPONSES)
def update_role(
    role_id: str,
    role_in: RoleUpdate | None = None,
    store: EntityStore = Depends(get_store),
):
    """Update a role; ``isDefault`` can move to this role but never be unset."""

    role_in = role_in or RoleUpdate()
    try:
        role = update_role_uc(
            store,
            role_id,
            name=role_in.name,
            description=role_in.description,
            is_default=role_in.is_default,
        )
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(role)


@router.post("", response_model=RoleRead, responses=_ERROR_RESPONSES)
def register_role(
    role_in: RoleCreate | None = None,
    store: EntityStore = Depends(get_store),
):
    role_in = role_in or RoleCreate()
    try:
        role = create_role_uc(
            store,
            name=role_in.name,
            description=role_in.description,
            is_default=role_in.is_default,
        )
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(role)


@router.delete("/{role_id}", response_model=RoleRead, responses=_ERROR_RESPONSES)
def delete_role(role_id: str, store: EntityStore = Depends(get_store)):
    """Delete the role and move its users to the default role."""

    try:
        role = delete_role_uc(store, role_id)
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(role)
