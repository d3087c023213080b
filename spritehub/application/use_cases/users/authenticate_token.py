# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from spritehub.domain.users.entities import PublicUser
from spritehub.domain.users.exceptions import InvalidTokenError
from spritehub.domain.users.repositories import TokenService
from spritehub.shared.logging import logger

from .get_profile import GetProfileUseCase


class AuthenticateTokenUseCase:
    """Verify a bearer token and resolve its subject to a current user."""

    def __init__(self, *, tokens: TokenService, profiles: GetProfileUseCase) -> None:
        self._tokens = tokens
        self._profiles = profiles

    def execute(self, token: str) -> PublicUser:
        claims = self._tokens.verify(token)
        user = self._profiles.by_id(claims.subject_id)
        if user is None:
            logger.warning(f"auth.token: subject not found user_id={claims.subject_id}")
            raise InvalidTokenError()
        return user
