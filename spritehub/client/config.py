# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientConfig(BaseSettings):
    api_base_url: str = Field("http://localhost:3000")
    timeout: float = Field(10.0, ge=0.1)
    session_dir: str = Field(".spritehub")

    model_config = SettingsConfigDict(
        env_prefix="SPRITEHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def load_client_config() -> ClientConfig:
    return ClientConfig()


__all__ = ["ClientConfig", "load_client_config"]
