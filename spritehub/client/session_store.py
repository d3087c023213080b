# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Client-side session state.

The store holds the current token and user, a ``loading`` flag for the
request in flight and the last error message. Only the token is persisted;
the user is always re-fetched from ``/auth/me`` after a restart.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, TypeVar

from spritehub.shared.logging import logger

from .api import ApiError, AuthApiClient
from .storage import SessionStorage

TOKEN_KEY = "token"
LOGIN_FAILED = "Login failed"
REGISTRATION_FAILED = "Registration failed"

T = TypeVar("T")


class SessionError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoTokenError(SessionError):
    def __init__(self) -> None:
        super().__init__("No token available")


class RequestInFlightError(SessionError):
    def __init__(self) -> None:
        super().__init__("Another request is already in progress")


@dataclass(slots=True, frozen=True)
class SessionUser:
    id: int
    username: str

    @classmethod
    def from_payload(cls, payload: Any) -> SessionUser:
        if not isinstance(payload, dict):
            raise ApiError(200, "Malformed user payload")
        try:
            return cls(id=int(payload["id"]), username=str(payload["username"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise ApiError(200, "Malformed user payload") from exc


class SessionStore:
    def __init__(self, api: AuthApiClient, storage: SessionStorage) -> None:
        self._api = api
        self._storage = storage
        self.token: str | None = None
        self.user: SessionUser | None = None
        self.loading = False
        self.error: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None and self.user is not None

    @contextmanager
    def _request(self) -> Iterator[None]:
        if self.loading:
            raise RequestInFlightError()
        self.loading = True
        self.error = None
        try:
            yield
        finally:
            self.loading = False

    def _fail(self, exc: ApiError, fallback: str) -> SessionError:
        self.error = exc.message or fallback
        return SessionError(self.error)

    def _call(self, fn: Callable[[], T], fallback: str) -> T:
        try:
            return fn()
        except ApiError as exc:
            raise self._fail(exc, fallback) from exc

    def initialize(self) -> None:
        stored = self._storage.get(TOKEN_KEY)
        if not stored:
            return
        self.token = stored
        try:
            self.fetch_user()
        except (ApiError, SessionError) as exc:
            # fetch_user already cleared the session
            logger.info(f"client.session: stored token rejected ({type(exc).__name__})")

    def login(self, username: str, password: str) -> SessionUser:
        with self._request():
            payload = self._call(lambda: self._api.login(username, password), LOGIN_FAILED)
            try:
                token = str(payload["accessToken"])
                user = SessionUser.from_payload(payload.get("user"))
            except (KeyError, TypeError, ApiError) as exc:
                self.error = LOGIN_FAILED
                raise SessionError(LOGIN_FAILED) from exc

            self._storage.set(TOKEN_KEY, token)
            self.token = token
            self.user = user
            logger.info(f"client.session: logged in user_id={user.id}")
            return user

    def register(self, username: str, password: str, confirm_password: str) -> dict[str, Any]:
        with self._request():
            return self._call(
                lambda: self._api.register(username, password, confirm_password),
                REGISTRATION_FAILED,
            )

    def fetch_user(self) -> SessionUser:
        if self.token is None:
            raise NoTokenError()
        try:
            user = SessionUser.from_payload(self._api.me(self.token))
        except ApiError:
            self.clear()
            raise
        self.user = user
        return user

    def logout(self) -> None:
        self.clear()

    def clear(self) -> None:
        self.token = None
        self.user = None
        self._storage.remove(TOKEN_KEY)

    def clear_error(self) -> None:
        self.error = None


__all__ = [
    "NoTokenError",
    "RequestInFlightError",
    "SessionError",
    "SessionStore",
    "SessionUser",
    "TOKEN_KEY",
]
