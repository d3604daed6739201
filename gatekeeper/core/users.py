"""Read-only user repository for authentication and role checks.

Users are a fixed in-memory set loaded at process start. Lookups are linear
scans; the set is small and never mutated, so no index or locking is needed.
"""

from collections.abc import Iterable, Iterator
from typing import Literal, Protocol

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["admin", "basic"]


class User(BaseModel):
    """
    User account for bearer-token authentication and role-based access control.

    password is stored and compared in plain text (demo only, never hashed).
    secret is the per-user bearer token.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    username: str = Field(..., min_length=1)
    password: str
    role: Role
    secret: str = Field(..., min_length=1)


class UserRepository(Protocol):
    """Lookup interface the verifier depends on; swap for a real store later."""

    def find_by_username(self, username: str) -> User | None: ...

    def find_by_secret(self, secret: str) -> User | None: ...


class InMemoryUserRepository:
    """Immutable user set with linear lookup by username or secret."""

    def __init__(self, users: Iterable[User]) -> None:
        self._users: tuple[User, ...] = tuple(users)
        _ensure_unique(self._users, "id")
        _ensure_unique(self._users, "username")
        _ensure_unique(self._users, "secret")

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)

    def __len__(self) -> int:
        return len(self._users)

    def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users if u.username == username), None)

    def find_by_secret(self, secret: str) -> User | None:
        return next((u for u in self._users if u.secret == secret), None)


def _ensure_unique(users: tuple[User, ...], field: str) -> None:
    seen: set[object] = set()
    for user in users:
        value = getattr(user, field)
        if value in seen:
            raise ValueError(f"Duplicate user {field}: {value!r}")
        seen.add(value)


DEFAULT_USERS: tuple[User, ...] = (
    User(id=1, username="admin", password="admin123", role="admin", secret="admin-secret-123"),
    User(id=2, username="user", password="user123", role="basic", secret="user-secret-456"),
)

default_repository = InMemoryUserRepository(DEFAULT_USERS)
