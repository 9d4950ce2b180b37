"""Shared fixtures for the API test-suite."""

from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

# Ensure the project root (which contains the ``mock_api`` package) is importable
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from mock_api.config import Settings
from mock_api.infrastructure.store import EntityStore

PAGE_SIZE = 10


@pytest.fixture()
def settings() -> Settings:
    """Settings with no latency and no injected failures."""

    return Settings(
        port=0,
        speed="instant",
        page_size=PAGE_SIZE,
        chance_of_server_error=0.0,
        request_logging=False,
    )


@pytest.fixture()
def store() -> EntityStore:
    return EntityStore()


@pytest.fixture()
def client(settings: Settings, store: EntityStore):
    """Return a test client bound to a fresh application and store."""

    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from mock_api.main import create_app

    app = create_app(settings, store=store, rng=random.Random(1234))
    with TestClient(app) as test_client:
        yield test_client


def _assert_store_invariants(store: EntityStore) -> None:
    """Exactly one default role, and every user points at an existing role."""

    users, roles = store.snapshot()
    assert sum(1 for role in roles if role.is_default) == 1
    role_ids = {role.id for role in roles}
    assert all(user.role_id in role_ids for user in users)


@pytest.fixture()
def assert_invariants():
    return _assert_store_invariants
