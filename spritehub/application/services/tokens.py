# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed claims tokens (JWT, HS256 by default)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from spritehub.domain.users.entities import TokenClaims
from spritehub.domain.users.exceptions import ExpiredTokenError, InvalidTokenError
from spritehub.domain.users.repositories import TokenService


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    """Stateless issuer/verifier.

    Verification never touches storage, so callers that need the user to still
    exist must resolve ``subject_id`` themselves.
    """

    def __init__(
        self,
        secret: str,
        *,
        expires_in: timedelta = timedelta(hours=1),
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("JWT secret must be configured")
        self._secret = secret
        self._expires_in = expires_in
        self._algorithm = algorithm
        self._clock = clock

    def issue(self, subject_id: int, username: str) -> str:
        issued_at = self._clock()
        payload = {
            # PyJWT requires a string subject
            "sub": str(subject_id),
            "username": username,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._expires_in).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        if not token:
            raise InvalidTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError() from None
        except jwt.InvalidTokenError:
            raise InvalidTokenError() from None

        try:
            subject_id = int(payload["sub"])
            username = str(payload["username"])
        except (KeyError, TypeError, ValueError):
            raise InvalidTokenError() from None

        return TokenClaims(
            subject_id=subject_id,
            username=username,
            issued_at=datetime.fromtimestamp(payload["iat"], tz=UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
        )
