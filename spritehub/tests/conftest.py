from __future__ import annotations

import os

import pytest

from spritehub.shared.config import AppConfig, load_config
from spritehub.shared.config.settings import AuthConfig, DatabaseConfig, SecurityConfig

from .fakes import TEST_SECRET, DeterministicHasher, InMemoryUserRepository

os.environ.setdefault("JWT_SECRET", TEST_SECRET)
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("APP_ENV", "test")


@pytest.fixture(autouse=True)
def _reset_config_cache():
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(
        jwt_secret=TEST_SECRET,
        database=DatabaseConfig(url="sqlite:///:memory:"),
        # cheap hashes keep the integration tests fast
        auth=AuthConfig(password_hash_method="pbkdf2:sha256:1000"),
        security=SecurityConfig(enable_rate_limit=False),
    )
