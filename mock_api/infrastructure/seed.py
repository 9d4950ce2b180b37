"""Fixed dataset loaded into every store at start-up and on reset."""

from __future__ import annotations

from dataclasses import replace

from mock_api.domain.entities import Role, User

DEFAULT_ROLE_ID = "6c0a71c0-a5bc-44f8-8634-60f44840d92a"
ENGINEERING_ROLE_ID = "1a235261-fa93-4845-ab48-ee23895998e6"
SUPPORT_ROLE_ID = "b3f1d9e2-5c47-4a8e-9d06-2e7a41c8f5b3"
DESIGN_ROLE_ID = "f4a9c2d7-81e3-4b5f-a6d0-93c7e2b1f864"

SEED_ROLES: tuple[Role, ...] = (
    Role(
        id=DEFAULT_ROLE_ID,
        created_at="2023-06-01T08:00:00.000Z",
        updated_at="2023-06-01T08:00:00.000Z",
        name="Member",
        description="Members have standard access to shared projects and documents.",
        is_default=True,
    ),
    Role(
        id=ENGINEERING_ROLE_ID,
        created_at="2023-06-05T10:24:31.117Z",
        updated_at="2023-06-05T10:24:31.117Z",
        name="Engineering",
        description="Engineers build and maintain the software that powers our products and services.",
    ),
    Role(
        id=SUPPORT_ROLE_ID,
        created_at="2023-06-12T14:03:58.640Z",
        updated_at="2023-07-30T09:12:05.002Z",
        name="Support",
        description="Support specialists help customers get the most out of our products.",
    ),
    Role(
        id=DESIGN_ROLE_ID,
        created_at="2023-06-20T16:47:12.389Z",
        updated_at="2023-06-20T16:47:12.389Z",
        name="Design",
        description="Designers shape the visual language and user experience of our products.",
    ),
)


def _user(
    user_id: str,
    first: str,
    last: str,
    role_id: str,
    created_at: str,
    img: int,
    updated_at: str | None = None,
) -> User:
    return User(
        id=user_id,
        created_at=created_at,
        updated_at=updated_at or created_at,
        first=first,
        last=last,
        role_id=role_id,
        photo=f"https://i.pravatar.cc/400?img={img}",
    )


SEED_USERS: tuple[User, ...] = (
    _user("c7deb881-1939-4208-9a63-61a885f02d8f", "Mark", "Tipton", ENGINEERING_ROLE_ID, "2024-03-14T16:42:11.512Z", 12),
    _user("0b6e2f4a-7d1c-4e93-8a5b-c2f90d3e7a16", "Amelia", "Chen", ENGINEERING_ROLE_ID, "2024-03-02T09:15:44.201Z", 47),
    _user("5d8a3c91-2e6f-47b0-b1d4-8f7e6a0c2b59", "Darius", "Okafor", SUPPORT_ROLE_ID, "2024-02-21T13:30:02.874Z", 33),
    _user("9e4f7b12-c5a8-4d36-92e1-7b0d3f6a8c45", "Priya", "Raman", ENGINEERING_ROLE_ID, "2024-02-10T11:05:19.936Z", 44, "2024-03-01T08:45:00.000Z"),
    _user("3a7c9d05-b4e2-4f18-a6c3-1d5e8b2f0a97", "Lucas", "Ferreira", DESIGN_ROLE_ID, "2024-01-29T15:48:37.120Z", 59),
    _user("e2b5a8f6-4c91-4d7e-b3a0-6f2c1e9d5b84", "Hannah", "Kowalski", ENGINEERING_ROLE_ID, "2024-01-17T10:22:50.463Z", 26),
    _user("7f1d4e8b-93a6-4c25-8e7f-0a4b9c6d2e31", "Tobias", "Lindqvist", ENGINEERING_ROLE_ID, "2024-01-05T08:57:14.788Z", 15),
    _user("4c8e2a6d-1f5b-4a93-9c7e-d3b0f8a1e625", "Grace", "Whitfield", DEFAULT_ROLE_ID, "2023-12-19T17:11:26.305Z", 41),
    _user("a9d3f6c2-8e1b-4b74-a5d9-2c6e0f7b3a18", "Noah", "Bennett", ENGINEERING_ROLE_ID, "2023-12-02T12:39:08.651Z", 8),
    _user("6b2e9f1a-d7c4-4e58-b0a3-9f5d2c8e4b76", "Sofia", "Alvarez", ENGINEERING_ROLE_ID, "2023-11-20T09:26:45.019Z", 38),
    _user("d1a5c8e3-6b9f-4d02-8e4a-5c7b1f3d9a20", "Ethan", "Brooks", SUPPORT_ROLE_ID, "2023-11-03T14:14:33.742Z", 52),
    _user("8c4f0b7e-2a6d-4f91-b8c5-e1d9a3f6b042", "Isabella", "Romano", DESIGN_ROLE_ID, "2023-10-18T16:05:57.288Z", 20),
    _user("2f9b6d3a-e8c1-4a57-9b2d-7e4f0c5a1d68", "Oliver", "Nakamura", DEFAULT_ROLE_ID, "2023-09-27T11:48:21.934Z", 60),
    _user("b7e3a1d9-5f2c-4e86-a0b7-4d8c6f2e9b13", "Chloe", "Dubois", SUPPORT_ROLE_ID, "2023-09-08T10:31:09.456Z", 5),
    _user("1e6c4b8f-a3d7-4f29-8c1e-b5a2d9f0e7c4", "Samuel", "Adeyemi", DEFAULT_ROLE_ID, "2023-08-22T13:53:40.817Z", 68),
    _user("f0d8b2e5-7c4a-4b13-9e6f-a1c3d5b8e290", "Zoe", "Harper", DESIGN_ROLE_ID, "2023-08-01T09:02:18.163Z", 29),
)


def seed_roles() -> list[Role]:
    """Return fresh copies of the seeded roles."""

    return [replace(role) for role in SEED_ROLES]


def seed_users() -> list[User]:
    """Return fresh copies of the seeded users."""

    return [replace(user) for user in SEED_USERS]


__all__ = [
    "DEFAULT_ROLE_ID",
    "DESIGN_ROLE_ID",
    "ENGINEERING_ROLE_ID",
    "SEED_ROLES",
    "SEED_USERS",
    "SUPPORT_ROLE_ID",
    "seed_roles",
    "seed_users",
]
