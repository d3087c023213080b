# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from spritehub.shared.errors.base import DomainError, ValidationError


class PasswordMismatchError(ValidationError):
    def __init__(self) -> None:
        super().__init__(code="passwords_do_not_match", message="Passwords do not match")


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    message = "Username already exists"


# The message is identical for an unknown username and a wrong password.
class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid credentials"


class InvalidTokenError(DomainError):
    code = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED
    message = "Unauthorized"


class ExpiredTokenError(InvalidTokenError):
    pass
