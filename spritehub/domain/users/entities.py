# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str
    created_at: datetime

    def public(self) -> PublicUser:
        return PublicUser(id=self.id, username=self.username)


@dataclass(slots=True, frozen=True)
class PublicUser:
    """Read-facing projection of a user; never carries the password hash."""

    id: int
    username: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "username": self.username}


@dataclass(slots=True, frozen=True)
class TokenClaims:

    subject_id: int
    username: str
    issued_at: datetime
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class RegistrationResult:

    message: str
    username: str

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "username": self.username}


@dataclass(slots=True, frozen=True)
class LoginResult:

    access_token: str
    user: PublicUser

    def to_dict(self) -> dict[str, Any]:
        return {"accessToken": self.access_token, "user": self.user.to_dict()}
