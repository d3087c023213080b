# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import cast

from flask import g, request

from spritehub.application.use_cases.users.authenticate_token import (
    AuthenticateTokenUseCase,
)
from spritehub.domain.users.entities import PublicUser
from spritehub.domain.users.exceptions import InvalidTokenError
from spritehub.shared.logging import logger


def bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    scheme, _, token = auth.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()


def current_user() -> PublicUser:
    """Return the user resolved by :func:`bearer_required` for this request."""
    return cast(PublicUser, g.user)


def bearer_required(authenticate: AuthenticateTokenUseCase):
    def decorator(f: Callable):
        @wraps(f)
        def inner(*a, **kw):
            token = bearer_token()
            if not token:
                logger.warning(
                    f"No bearer token on {request.method} {request.path}"
                )
                raise InvalidTokenError()

            try:
                g.user = authenticate.execute(token)
            except InvalidTokenError:
                logger.warning(
                    f"Auth failed (token invalid/expired) on {request.method} {request.path}"
                )
                raise

            logger.debug(f"Auth OK: user={g.user.id} {request.method} {request.path}")
            return f(*a, **kw)

        return inner

    return decorator


__all__ = ["bearer_required", "bearer_token", "current_user"]
