from fastapi import FastAPI

from .roles import router as roles_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register the user and role routers on the FastAPI application."""

    app.include_router(users_router)
    app.include_router(roles_router)
