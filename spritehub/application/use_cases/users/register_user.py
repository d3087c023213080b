# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from spritehub.domain.users.entities import RegistrationResult
from spritehub.domain.users.exceptions import PasswordMismatchError, UserAlreadyExistsError
from spritehub.domain.users.repositories import PasswordHasher, UserRepository
from spritehub.shared.errors.base import InternalError
from spritehub.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str, confirm_password: str) -> RegistrationResult:
        logger.info(f"auth.register: start username={username}")
        if password != confirm_password:
            logger.warning(f"auth.register: password mismatch username={username}")
            raise PasswordMismatchError()

        try:
            if self._users.find_by_username(username):
                raise UserAlreadyExistsError()
            hashed = self._password_hasher.hash(password)
            # the store enforces uniqueness again for concurrent registrations
            user = self._users.add(username, hashed)
        except UserAlreadyExistsError:
            logger.warning(f"auth.register: username taken username={username}")
            raise
        except Exception as exc:
            logger.opt(exception=exc).error(f"auth.register: error username={username}")
            raise InternalError("An error occurred during registration") from exc

        logger.info(f"auth.register: ok user_id={user.id}")
        return RegistrationResult(message="User registered successfully", username=user.username)
