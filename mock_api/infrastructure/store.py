"""In-memory storage shared by the repositories of one application."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from threading import RLock

from mock_api.domain.entities import Role, User

from .seed import seed_roles, seed_users

logger = logging.getLogger(__name__)

SeedLoader = Callable[[], tuple[list[User], list[Role]]]


def load_default_seed() -> tuple[list[User], list[Role]]:
    """Return fresh copies of the bundled users and roles."""

    return seed_users(), seed_roles()


class EntityStore:
    """Own the user and role collections and serialise their mutation.

    Every read-modify-write sequence runs inside :meth:`transaction`, which
    holds a re-entrant lock, so concurrent requests served from the thread
    pool cannot interleave their changes. :meth:`reset` takes the same lock.
    """

    def __init__(self, seed: SeedLoader | None = None) -> None:
        self._seed = seed or load_default_seed
        self._lock = RLock()
        self.users: list[User] = []
        self.roles: list[Role] = []
        self.reset()

    @contextmanager
    def transaction(self) -> Iterator["EntityStore"]:
        with self._lock:
            yield self

    def snapshot(self) -> tuple[list[User], list[Role]]:
        """Return shallow copies of both collections taken under the lock."""

        with self._lock:
            return list(self.users), list(self.roles)

    def reset(self) -> None:
        """Replace both collections with fresh copies of the seed data."""

        users, roles = self._seed()
        with self._lock:
            self.users = users
            self.roles = roles
        logger.debug("Store reset with %d users and %d roles", len(users), len(roles))


__all__ = ["EntityStore", "SeedLoader", "load_default_seed"]
