# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError

from spritehub.domain.users.entities import User as DomainUser
from spritehub.domain.users.exceptions import UserAlreadyExistsError
from spritehub.domain.users.repositories import UserRepository
from spritehub.infrastructure.db.models import User
from spritehub.infrastructure.db.session import Database


def _to_domain(row: User) -> DomainUser:
    created_at = row.created_at or datetime.now(UTC)
    if created_at.tzinfo is None:
        # SQLite drops the offset on the way back
        created_at = created_at.replace(tzinfo=UTC)
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, database: Database) -> None:
        self._database = database

    def find_by_username(self, username: str) -> DomainUser | None:
        with self._database.session_scope() as session:
            row = session.query(User).filter(User.username == username).first()
            if not row:
                return None
            return _to_domain(row)

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with self._database.session_scope() as session:
            row = session.get(User, user_id)
            if not row:
                return None
            return _to_domain(row)

    def add(self, username: str, password_hash: str) -> DomainUser:
        try:
            with self._database.session_scope() as session:
                row = User(username=username, password_hash=password_hash)
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            raise UserAlreadyExistsError() from exc
