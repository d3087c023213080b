# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, Field


class CreateSpriteDTO(BaseModel):
    url: str = Field(min_length=1, max_length=2048)
    name: str = Field(min_length=1, max_length=128)


class UpdateSpriteDTO(BaseModel):
    url: str | None = Field(default=None, max_length=2048)
    name: str | None = Field(default=None, max_length=128)


__all__ = ["CreateSpriteDTO", "UpdateSpriteDTO"]
