"""Domain entity representing a user role."""

from dataclasses import dataclass


@dataclass
class Role:
    """A named role that users reference; exactly one role is the default."""

    id: str
    created_at: str
    updated_at: str
    name: str
    description: str = ""
    is_default: bool = False


__all__ = ["Role"]
