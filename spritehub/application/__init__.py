# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services import JwtTokenService, SpriteService, WerkzeugPasswordHasher
from .use_cases.users import (
    AuthenticateTokenUseCase,
    GetProfileUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
)

__all__ = [
    "AuthenticateTokenUseCase",
    "GetProfileUseCase",
    "JwtTokenService",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "SpriteService",
    "WerkzeugPasswordHasher",
]
