from .error import MessageRead
from .page import PageRead
from .role import RoleCreate, RoleRead, RoleUpdate
from .user import UserCreate, UserRead, UserUpdate

__all__ = [
    "MessageRead",
    "PageRead",
    "RoleCreate",
    "RoleRead",
    "RoleUpdate",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
