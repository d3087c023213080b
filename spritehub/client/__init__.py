# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .api import ApiError, AuthApiClient
from .config import ClientConfig, load_client_config
from .router import Allow, Redirect, Route, RouteMeta, Router, guard_navigation
from .session_store import (
    NoTokenError,
    RequestInFlightError,
    SessionError,
    SessionStore,
    SessionUser,
)
from .storage import FileSessionStorage, MemorySessionStorage, SessionStorage

__all__ = [
    "Allow",
    "ApiError",
    "AuthApiClient",
    "ClientConfig",
    "FileSessionStorage",
    "MemorySessionStorage",
    "NoTokenError",
    "Redirect",
    "RequestInFlightError",
    "Route",
    "RouteMeta",
    "Router",
    "SessionError",
    "SessionStorage",
    "SessionStore",
    "SessionUser",
    "guard_navigation",
    "load_client_config",
]
