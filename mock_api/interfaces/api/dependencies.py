"""FastAPI dependency utilities."""

import random

from fastapi import Request

from mock_api.config import Settings
from mock_api.infrastructure.store import EntityStore


def get_store(request: Request) -> EntityStore:
    """Return the store owned by the application serving ``request``."""

    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_rng(request: Request) -> random.Random:
    return request.app.state.rng
