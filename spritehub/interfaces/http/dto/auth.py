# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")


class RegisterRequestDTO(BaseModel):
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)

    username: str = Field(min_length=3, max_length=64)
    password: str = Field(min_length=6, max_length=128)
    confirm_password: str = Field(alias="confirmPassword", max_length=128)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        if not _USERNAME_PATTERN.match(value):
            raise PydanticCustomError(
                "username_invalid_chars",
                "Username must contain only letters, digits and underscores",
                {"pattern": _USERNAME_PATTERN.pattern},
            )
        return value


class LoginRequestDTO(BaseModel):
    # no length rules beyond non-empty: a wrong-shaped login is still just
    # invalid credentials
    username: str = Field(min_length=1, max_length=128)
    password: str = Field(min_length=1, max_length=128)


__all__ = ["LoginRequestDTO", "RegisterRequestDTO"]
