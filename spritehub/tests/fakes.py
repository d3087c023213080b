from __future__ import annotations

from datetime import UTC, datetime

from spritehub.domain.users.entities import User
from spritehub.domain.users.exceptions import UserAlreadyExistsError
from spritehub.domain.users.repositories import PasswordHasher, UserRepository

TEST_SECRET = "pytest-signing-key-0123456789abcdef0123"


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def find_by_id(self, user_id: int) -> User | None:
        for user in self._users.values():
            if user.id == user_id:
                return user
        return None

    def add(self, username: str, password_hash: str) -> User:
        if username in self._users:
            raise UserAlreadyExistsError()
        user = User(
            id=self._seq,
            username=username,
            password_hash=password_hash,
            created_at=datetime.now(UTC),
        )
        self._seq += 1
        self._users[username] = user
        return user

    def delete(self, username: str) -> None:
        self._users.pop(username, None)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"
