# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from spritehub.application.services.password_hashing import WerkzeugPasswordHasher
from spritehub.application.services.sprite_service import SpriteService
from spritehub.application.services.tokens import JwtTokenService
from spritehub.application.use_cases.users.authenticate_token import (
    AuthenticateTokenUseCase,
)
from spritehub.application.use_cases.users.get_profile import GetProfileUseCase
from spritehub.application.use_cases.users.login_user import LoginUserUseCase
from spritehub.application.use_cases.users.register_user import RegisterUserUseCase
from spritehub.infrastructure.db.session import Database
from spritehub.infrastructure.pokeapi import PokeApiClient
from spritehub.infrastructure.repositories.sprites.memory_sprite_repository import (
    InMemorySpriteRepository,
)
from spritehub.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from spritehub.interfaces.http.controllers.auth_controller import AuthController
from spritehub.interfaces.http.controllers.sprites_controller import SpritesController
from spritehub.shared.config import AppConfig, load_config
from spritehub.shared.middleware.rate_limit import InMemoryRateLimiter


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or load_config()

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(
            method=self.config.auth.password_hash_method,
            salt_length=self.config.auth.password_salt_length,
        )

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            self.config.jwt_secret,
            expires_in=timedelta(seconds=self.config.auth.token_expires_in),
            algorithm=self.config.auth.token_algorithm,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def get_profile_use_case(self) -> GetProfileUseCase:
        return GetProfileUseCase(users=self.user_repository)

    @cached_property
    def authenticate_token_use_case(self) -> AuthenticateTokenUseCase:
        return AuthenticateTokenUseCase(
            tokens=self.token_service,
            profiles=self.get_profile_use_case,
        )

    @cached_property
    def auth_rate_limiter(self) -> InMemoryRateLimiter | None:
        security = self.config.security
        if not security.enable_rate_limit:
            return None
        return InMemoryRateLimiter(
            limit=security.rate_limit_requests,
            window_seconds=security.rate_limit_window,
            trust_forwarded=security.trust_proxy_headers,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            profile_use_case=self.get_profile_use_case,
            authenticate=self.authenticate_token_use_case,
            rate_limiter=self.auth_rate_limiter,
        )

    # Sprites

    @cached_property
    def sprite_repository(self) -> InMemorySpriteRepository:
        return InMemorySpriteRepository()

    @cached_property
    def sprite_source(self) -> PokeApiClient:
        return PokeApiClient(
            self.config.pokeapi.base_url,
            timeout=self.config.pokeapi.timeout,
        )

    @cached_property
    def sprite_service(self) -> SpriteService:
        return SpriteService(
            sprites=self.sprite_repository,
            source=self.sprite_source,
            max_pokemon_id=self.config.pokeapi.max_pokemon_id,
        )

    @cached_property
    def sprites_controller(self) -> SpritesController:
        return SpritesController(
            sprite_service=self.sprite_service,
            authenticate=self.authenticate_token_use_case,
        )


__all__ = ["Container"]
