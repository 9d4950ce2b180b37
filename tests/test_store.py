"""Tests for the in-memory entity store."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from threading import Barrier

from mock_api.application.use_cases.roles import create_role, delete_role, list_roles, update_role
from mock_api.application.use_cases.users import update_user
from mock_api.domain.exceptions import DomainError
from mock_api.infrastructure.repositories import RoleRepository
from mock_api.infrastructure.seed import (
    DEFAULT_ROLE_ID,
    DESIGN_ROLE_ID,
    ENGINEERING_ROLE_ID,
    SEED_USERS,
    SUPPORT_ROLE_ID,
)
from mock_api.infrastructure.store import EntityStore

MARK_ID = "c7deb881-1939-4208-9a63-61a885f02d8f"


def test_store_starts_from_seed(store):
    users, roles = store.snapshot()

    assert len(users) == 16
    assert len(roles) == 4
    assert [role.id for role in roles if role.is_default] == [DEFAULT_ROLE_ID]
    assert sum(1 for user in users if user.role_id == ENGINEERING_ROLE_ID) == 7


def test_reset_restores_seed_after_mutations(store):
    update_user(store, MARK_ID, first="Max")
    delete_role(store, ENGINEERING_ROLE_ID)
    create_role(store, name="Security", is_default=True)

    store.reset()

    fresh_users, fresh_roles = EntityStore().snapshot()
    assert store.snapshot() == (fresh_users, fresh_roles)


def test_mutations_never_touch_the_seed(store):
    update_user(store, MARK_ID, first="Max")
    store.users[0].last = "Changed"

    assert next(user for user in SEED_USERS if user.id == MARK_ID).first == "Mark"
    assert all(user.last != "Changed" for user in SEED_USERS)


def test_stores_are_isolated():
    first, second = EntityStore(), EntityStore()

    delete_role(first, ENGINEERING_ROLE_ID)

    assert len(first.roles) == 3
    assert len(second.roles) == 4


def test_snapshot_is_a_copy(store):
    users, _ = store.snapshot()
    users.clear()

    assert len(store.users) == 16


def test_custom_seed():
    store = EntityStore(seed=lambda: ([], []))

    assert store.snapshot() == ([], [])


def test_repository_list_returns_a_copy(store):
    roles = RoleRepository(store).list()
    roles.clear()

    assert len(store.roles) == 4
    assert list_roles(store, page_size=10).pages == 1


ROLE_IDS = (DEFAULT_ROLE_ID, ENGINEERING_ROLE_ID, SUPPORT_ROLE_ID, DESIGN_ROLE_ID)
ROUNDS = 300


def test_concurrent_writers_and_resets_keep_invariants(store, assert_invariants):
    start = Barrier(6)

    def flip_default(offset):
        start.wait()
        for index in range(ROUNDS):
            try:
                update_role(store, ROLE_IDS[(index + offset) % len(ROLE_IDS)], is_default=True)
            except DomainError:
                pass

    def move_user():
        start.wait()
        for index in range(ROUNDS):
            try:
                update_user(store, MARK_ID, role_id=ROLE_IDS[index % len(ROLE_IDS)])
            except DomainError:
                pass

    def delete_roles():
        start.wait()
        for index in range(ROUNDS):
            try:
                delete_role(store, ROLE_IDS[index % len(ROLE_IDS)])
            except DomainError:
                pass

    def reset():
        start.wait()
        for _ in range(ROUNDS // 10):
            store.reset()

    def check():
        start.wait()
        for _ in range(ROUNDS):
            assert_invariants(store)

    with ThreadPoolExecutor(max_workers=6) as executor:
        futures = [
            executor.submit(flip_default, 0),
            executor.submit(flip_default, 1),
            executor.submit(move_user),
            executor.submit(delete_roles),
            executor.submit(reset),
            executor.submit(check),
        ]
        for future in futures:
            future.result()

    assert_invariants(store)
