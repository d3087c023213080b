from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from spritehub.client.api import ApiError, AuthApiClient
from spritehub.client.session_store import (
    TOKEN_KEY,
    NoTokenError,
    RequestInFlightError,
    SessionError,
    SessionStore,
    SessionUser,
)
from spritehub.client.storage import FileSessionStorage, MemorySessionStorage

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingBackend:
    """Stands in for the HTTP API; every request is recorded."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.valid_token = "good-token"
        self.login_response = httpx.Response(
            200, json={"accessToken": "good-token", "user": {"id": 1, "username": "alice"}}
        )
        self.register_response = httpx.Response(
            201, json={"message": "User registered successfully", "username": "alice"}
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/auth/login":
            return self.login_response
        if request.url.path == "/auth/register":
            return self.register_response
        if request.url.path == "/auth/me":
            if request.headers.get("Authorization") == f"Bearer {self.valid_token}":
                return httpx.Response(200, json={"id": 1, "username": "alice"})
            return httpx.Response(401, json={"error": "unauthorized", "message": "Unauthorized"})
        return httpx.Response(404)


@pytest.fixture()
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture()
def storage() -> MemorySessionStorage:
    return MemorySessionStorage()


@pytest.fixture()
def store(backend: RecordingBackend, storage: MemorySessionStorage) -> SessionStore:
    api = AuthApiClient("http://api.test", transport=httpx.MockTransport(backend))
    return SessionStore(api, storage)


def test_initialize_with_expired_token_clears_everything(
    store: SessionStore, storage: MemorySessionStorage
) -> None:
    storage.set(TOKEN_KEY, "expired-token")

    store.initialize()

    assert store.token is None
    assert store.user is None
    assert storage.get(TOKEN_KEY) is None
    assert not store.is_authenticated


def test_initialize_with_valid_token_restores_user(
    store: SessionStore, storage: MemorySessionStorage
) -> None:
    storage.set(TOKEN_KEY, "good-token")

    store.initialize()

    assert store.token == "good-token"
    assert store.user == SessionUser(1, "alice")
    assert store.is_authenticated


def test_initialize_without_token_does_nothing(
    store: SessionStore, backend: RecordingBackend
) -> None:
    store.initialize()

    assert backend.requests == []
    assert not store.is_authenticated


def test_login_success_persists_token(store: SessionStore, storage: MemorySessionStorage) -> None:
    user = store.login("alice", "pw123456")

    assert user == SessionUser(1, "alice")
    assert store.token == "good-token"
    assert storage.get(TOKEN_KEY) == "good-token"
    assert store.loading is False
    assert store.error is None


def test_login_failure_keeps_state_and_uses_server_message(
    store: SessionStore, backend: RecordingBackend, storage: MemorySessionStorage
) -> None:
    backend.login_response = httpx.Response(
        401, json={"error": "invalid_credentials", "message": "Invalid credentials"}
    )

    with pytest.raises(SessionError, match="Invalid credentials"):
        store.login("alice", "wrong")

    assert store.error == "Invalid credentials"
    assert store.token is None
    assert store.user is None
    assert storage.get(TOKEN_KEY) is None
    assert store.loading is False


def test_login_failure_without_message_uses_fallback(
    store: SessionStore, backend: RecordingBackend
) -> None:
    backend.login_response = httpx.Response(502, text="bad gateway")

    with pytest.raises(SessionError):
        store.login("alice", "pw123456")

    assert store.error == "Login failed"


def test_login_clears_previous_error(store: SessionStore) -> None:
    store.error = "old"

    store.login("alice", "pw123456")

    assert store.error is None


def test_register_does_not_authenticate(store: SessionStore) -> None:
    result = store.register("alice", "pw123456", "pw123456")

    assert result["username"] == "alice"
    assert store.token is None
    assert store.user is None
    assert store.loading is False


def test_register_failure_sets_error(store: SessionStore, backend: RecordingBackend) -> None:
    backend.register_response = httpx.Response(
        400, json={"error": "user_already_exists", "message": "Username already exists"}
    )

    with pytest.raises(SessionError):
        store.register("alice", "pw123456", "pw123456")

    assert store.error == "Username already exists"
    assert store.token is None


def test_fetch_user_without_token_makes_no_request(
    store: SessionStore, backend: RecordingBackend
) -> None:
    with pytest.raises(NoTokenError):
        store.fetch_user()

    assert backend.requests == []


def test_fetch_user_unauthorized_logs_out(
    store: SessionStore, backend: RecordingBackend, storage: MemorySessionStorage
) -> None:
    store.login("alice", "pw123456")
    backend.valid_token = "rotated"

    with pytest.raises(ApiError) as exc_info:
        store.fetch_user()

    assert exc_info.value.status_code == 401
    assert store.token is None
    assert store.user is None
    assert storage.get(TOKEN_KEY) is None


def test_logout_is_local_and_idempotent(
    store: SessionStore, backend: RecordingBackend, storage: MemorySessionStorage
) -> None:
    store.login("alice", "pw123456")
    requests_before = len(backend.requests)

    store.logout()
    store.logout()

    assert len(backend.requests) == requests_before
    assert not store.is_authenticated
    assert storage.get(TOKEN_KEY) is None


def test_overlapping_request_is_refused(store: SessionStore, backend: RecordingBackend) -> None:
    store.loading = True

    with pytest.raises(RequestInFlightError):
        store.login("alice", "pw123456")

    assert backend.requests == []
    assert store.token is None


def test_clear_error(store: SessionStore, backend: RecordingBackend) -> None:
    backend.login_response = httpx.Response(401, json={"message": "Invalid credentials"})
    with pytest.raises(SessionError):
        store.login("alice", "wrong")

    store.clear_error()

    assert store.error is None


def _html_store(storage: MemorySessionStorage) -> SessionStore:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html><body>app shell</body></html>")

    api = AuthApiClient("http://api.test", transport=httpx.MockTransport(handler))
    return SessionStore(api, storage)


def test_initialize_with_html_profile_response_clears_everything(
    storage: MemorySessionStorage,
) -> None:
    storage.set(TOKEN_KEY, "stale")
    store = _html_store(storage)

    store.initialize()

    assert store.token is None
    assert store.user is None
    assert storage.get(TOKEN_KEY) is None


def test_login_with_html_response_uses_fallback(storage: MemorySessionStorage) -> None:
    store = _html_store(storage)

    with pytest.raises(SessionError):
        store.login("alice", "pw123456")

    assert store.error == "Login failed"
    assert store.token is None
    assert store.loading is False


def test_register_with_html_response_uses_fallback(storage: MemorySessionStorage) -> None:
    store = _html_store(storage)

    with pytest.raises(SessionError):
        store.register("alice", "pw123456", "pw123456")

    assert store.error == "Registration failed"
    assert store.loading is False


def test_file_storage_survives_new_instance(tmp_path) -> None:
    FileSessionStorage(tmp_path).set(TOKEN_KEY, "persisted")

    reopened = FileSessionStorage(tmp_path)
    assert reopened.get(TOKEN_KEY) == "persisted"

    reopened.remove(TOKEN_KEY)
    assert FileSessionStorage(tmp_path).get(TOKEN_KEY) is None


def test_file_storage_ignores_corrupt_file(tmp_path) -> None:
    storage = FileSessionStorage(tmp_path)
    with open(storage.path, "w", encoding="utf-8") as fh:
        fh.write("{not json")

    assert storage.get(TOKEN_KEY) is None
