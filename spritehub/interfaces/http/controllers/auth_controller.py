# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from spritehub.application.use_cases.users.authenticate_token import (
    AuthenticateTokenUseCase,
)
from spritehub.application.use_cases.users.get_profile import GetProfileUseCase
from spritehub.application.use_cases.users.login_user import LoginUserUseCase
from spritehub.application.use_cases.users.register_user import RegisterUserUseCase
from spritehub.interfaces.http.auth import bearer_required, current_user
from spritehub.interfaces.http.dto.auth import LoginRequestDTO, RegisterRequestDTO
from spritehub.shared.errors.validation import validation_error_from
from spritehub.shared.logging import logger
from spritehub.shared.middleware.rate_limit import InMemoryRateLimiter, rate_limit
from spritehub.shared.validation import Err, validate_payload


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        profile_use_case: GetProfileUseCase,
        authenticate: AuthenticateTokenUseCase,
        rate_limiter: InMemoryRateLimiter | None = None,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._profile_use_case = profile_use_case
        self._authenticate = authenticate
        self._rate_limiter = rate_limiter

    def register(self) -> tuple[Response, int]:
        result = validate_payload(RegisterRequestDTO, request.get_json(silent=True))
        if isinstance(result, Err):
            raise validation_error_from(result.reason)
        dto = result.value

        outcome = self._register_use_case.execute(
            dto.username, dto.password, dto.confirm_password
        )
        return jsonify(outcome.to_dict()), 201

    def login(self) -> tuple[Response, int]:
        result = validate_payload(LoginRequestDTO, request.get_json(silent=True))
        if isinstance(result, Err):
            raise validation_error_from(result.reason)
        dto = result.value

        outcome = self._login_use_case.execute(dto.username, dto.password)
        return jsonify(outcome.to_dict()), 200

    def me(self) -> tuple[Response, int]:
        user = self._profile_use_case.execute(current_user())
        logger.debug(f"auth.me: ok user_id={user.id}")
        return jsonify(user.to_dict()), 200

    def as_blueprint(self) -> Blueprint:
        limited = rate_limit(self._rate_limiter)
        bp = Blueprint("auth", __name__, url_prefix="/auth")
        bp.add_url_rule("/register", view_func=limited(self.register), methods=["POST"])
        bp.add_url_rule("/login", view_func=limited(self.login), methods=["POST"])
        bp.add_url_rule(
            "/me", view_func=bearer_required(self._authenticate)(self.me), methods=["GET"]
        )
        return bp


__all__ = ["AuthController"]
