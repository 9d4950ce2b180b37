"""Infrastructure layer: the in-memory store, its seed data and repositories."""

from .store import EntityStore

__all__ = ["EntityStore"]
