# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

import httpx

from spritehub.shared.logging import logger


class ApiError(Exception):
    """Non-2xx response or transport failure.

    ``message`` is the server's ``message`` field when the body carried one,
    otherwise ``None``; ``status_code`` is 0 when no response arrived.
    """

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message or f"HTTP {status_code}")
        self.status_code = status_code
        self.message = message


def _server_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None


class AuthApiClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"), timeout=timeout, transport=transport
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> AuthApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        token: str | None = None,
    ) -> Any:
        headers = {"Authorization": f"Bearer {token}"} if token else None
        try:
            response = self._client.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning(f"client.api: {method} {path} transport error {type(exc).__name__}")
            raise ApiError(0) from exc

        if response.is_success:
            try:
                return response.json()
            except ValueError as exc:
                logger.warning(f"client.api: {method} {path} non-JSON body status={response.status_code}")
                raise ApiError(response.status_code) from exc

        logger.debug(f"client.api: {method} {path} status={response.status_code}")
        raise ApiError(response.status_code, _server_message(response))

    def login(self, username: str, password: str) -> dict[str, Any]:
        return self._request(
            "POST", "/auth/login", json={"username": username, "password": password}
        )

    def register(
        self, username: str, password: str, confirm_password: str
    ) -> dict[str, Any]:
        return self._request(
            "POST",
            "/auth/register",
            json={
                "username": username,
                "password": password,
                "confirmPassword": confirm_password,
            },
        )

    def me(self, token: str) -> dict[str, Any]:
        return self._request("GET", "/auth/me", token=token)


__all__ = ["ApiError", "AuthApiClient"]
