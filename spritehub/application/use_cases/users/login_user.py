# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from spritehub.domain.users.entities import LoginResult, PublicUser
from spritehub.domain.users.exceptions import InvalidCredentialsError
from spritehub.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from spritehub.shared.errors.base import InternalError
from spritehub.shared.logging import logger


class LoginUserUseCase:
    """Credential check followed by token issuance.

    Unknown usernames and wrong passwords both end in the same
    ``InvalidCredentialsError`` so responses do not reveal which accounts exist.
    """

    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._dummy_hash: str | None = None

    def _unknown_user_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self._password_hasher.hash("unknown-user-placeholder")
        return self._dummy_hash

    def validate_credentials(self, username: str, password: str) -> PublicUser | None:
        user = self._users.find_by_username(username)
        if user is None:
            # an unknown user costs one verification, like a wrong password
            self._password_hasher.verify(password, self._unknown_user_hash())
            return None
        if not self._password_hasher.verify(password, user.password_hash):
            return None
        return user.public()

    def execute(self, username: str, password: str) -> LoginResult:
        logger.info(f"auth.login: start username={username}")
        try:
            user = self.validate_credentials(username, password)
            if user is None:
                logger.warning(f"auth.login: invalid credentials username={username}")
                raise InvalidCredentialsError()

            token = self._tokens.issue(user.id, user.username)
        except InvalidCredentialsError:
            raise
        except Exception as exc:
            logger.opt(exception=exc).error(f"auth.login: error username={username}")
            raise InternalError("An error occurred during login") from exc

        logger.info(f"auth.login: ok user_id={user.id}")
        return LoginResult(access_token=token, user=user)
