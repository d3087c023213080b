# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from spritehub.domain.users.entities import PublicUser
from spritehub.domain.users.repositories import UserRepository
from spritehub.shared.logging import logger


class GetProfileUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def by_id(self, user_id: int) -> PublicUser | None:
        # store failures map to None; this runs on every authenticated request
        try:
            user = self._users.find_by_id(user_id)
        except Exception:
            logger.exception(f"auth.user: lookup failed user_id={user_id}")
            return None
        return user.public() if user else None

    def execute(self, user: PublicUser) -> PublicUser:
        return user
