# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import LoginResult, PublicUser, RegistrationResult, TokenClaims, User
from .exceptions import (
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    PasswordMismatchError,
    UserAlreadyExistsError,
)
from .repositories import PasswordHasher, TokenService, UserRepository

__all__ = [
    "ExpiredTokenError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "LoginResult",
    "PasswordHasher",
    "PasswordMismatchError",
    "PublicUser",
    "RegistrationResult",
    "TokenClaims",
    "TokenService",
    "User",
    "UserAlreadyExistsError",
    "UserRepository",
]
