"""Helpers shared by the API routes."""

from __future__ import annotations

from fastapi import HTTPException, status

from mock_api.domain.entities import Page
from mock_api.domain.exceptions import (
    ConflictError,
    DomainError,
    InvalidReferenceError,
    NotFoundError,
    ValidationError,
)
from mock_api.interfaces.api.schemas import PageRead

_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (InvalidReferenceError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
)


def to_http_exception(exc: DomainError) -> HTTPException:
    """Translate a domain error into the HTTP error the client receives."""

    status_code = status.HTTP_400_BAD_REQUEST
    for error_type, mapped_status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            status_code = mapped_status
            break
    return HTTPException(status_code=status_code, detail=exc.message)


def to_page_model(page: Page, read_model: type) -> PageRead:
    return PageRead[read_model](
        data=[read_model.model_validate(item) for item in page.data],
        next=page.next,
        prev=page.prev,
        pages=page.pages,
    )
