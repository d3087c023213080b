from __future__ import annotations

import pytest
from flask import Flask

from spritehub.application.services.sprite_service import SpriteService
from spritehub.application.services.tokens import JwtTokenService
from spritehub.application.use_cases.users.authenticate_token import (
    AuthenticateTokenUseCase,
)
from spritehub.application.use_cases.users.get_profile import GetProfileUseCase
from spritehub.domain.sprites.entities import SpriteData
from spritehub.infrastructure.repositories.sprites.memory_sprite_repository import (
    InMemorySpriteRepository,
)
from spritehub.interfaces.http.controllers.sprites_controller import SpritesController
from spritehub.shared.middleware.error_handler import configure_error_handling

from .fakes import TEST_SECRET


class StubSource:
    def fetch(self, pokemon_id: int) -> SpriteData:
        return SpriteData(url=f"https://img/{pokemon_id}.png", name="bulbasaur")


@pytest.fixture()
def auth_headers(users, hasher) -> dict[str, str]:
    user = users.add("alice", hasher.hash("pw123456"))
    token = JwtTokenService(TEST_SECRET).issue(user.id, user.username)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def flask_app(users) -> Flask:
    tokens = JwtTokenService(TEST_SECRET)
    controller = SpritesController(
        sprite_service=SpriteService(
            sprites=InMemorySpriteRepository(),
            source=StubSource(),
            pick_id=lambda low, high: 1,
        ),
        authenticate=AuthenticateTokenUseCase(
            tokens=tokens, profiles=GetProfileUseCase(users=users)
        ),
    )
    app = Flask(__name__)
    configure_error_handling(app)
    app.register_blueprint(controller.as_blueprint())
    return app


def test_sprites_require_auth(flask_app: Flask) -> None:
    with flask_app.test_client() as client:
        assert client.get("/pokemon").status_code == 401
        assert client.delete("/pokemon/all").status_code == 401


def test_sprite_crud(flask_app: Flask, auth_headers: dict[str, str]) -> None:
    with flask_app.test_client() as client:
        created = client.post(
            "/pokemon", json={"url": "https://img/x.png", "name": "x"}, headers=auth_headers
        )
        sprite_id = created.get_json()["data"]["id"]
        updated = client.put(
            f"/pokemon/{sprite_id}", json={"name": "renamed"}, headers=auth_headers
        )
        listed = client.get("/pokemon", headers=auth_headers)
        deleted = client.delete(f"/pokemon/{sprite_id}", headers=auth_headers)

    assert created.status_code == 201
    assert created.get_json()["message"] == "Sprite created"
    assert updated.status_code == 200
    assert updated.get_json()["data"] == {
        "id": sprite_id,
        "url": "https://img/x.png",
        "name": "renamed",
    }
    assert listed.get_json() == [updated.get_json()["data"]]
    assert deleted.get_json() == {"deleted": True, "id": sprite_id}


def test_random_sprite(flask_app: Flask, auth_headers: dict[str, str]) -> None:
    with flask_app.test_client() as client:
        response = client.get("/pokemon/random", headers=auth_headers)

    assert response.status_code == 200
    assert response.get_json()["url"] == "https://img/1.png"
    assert response.get_json()["name"] == "bulbasaur"


def test_update_missing_sprite_is_404(flask_app: Flask, auth_headers: dict[str, str]) -> None:
    with flask_app.test_client() as client:
        response = client.put("/pokemon/77", json={"name": "x"}, headers=auth_headers)

    assert response.status_code == 404
    assert response.get_json()["error"] == "sprite_not_found"


def test_create_requires_url_and_name(flask_app: Flask, auth_headers: dict[str, str]) -> None:
    with flask_app.test_client() as client:
        response = client.post("/pokemon", json={"name": "x"}, headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()["context"]["fields"] == ["url"]


def test_delete_all(flask_app: Flask, auth_headers: dict[str, str]) -> None:
    with flask_app.test_client() as client:
        client.get("/pokemon/random", headers=auth_headers)
        client.get("/pokemon/random", headers=auth_headers)
        response = client.delete("/pokemon/all", headers=auth_headers)

    assert response.get_json() == {"deleted": True, "count": 2}


def test_get_sprite_by_id(flask_app: Flask, auth_headers: dict[str, str]) -> None:
    with flask_app.test_client() as client:
        created = client.post(
            "/pokemon", json={"url": "https://img/y.png", "name": "y"}, headers=auth_headers
        ).get_json()["data"]
        found = client.get(f"/pokemon/{created['id']}", headers=auth_headers)
        missing = client.get("/pokemon/999", headers=auth_headers)

    assert found.status_code == 200
    assert found.get_json() == created
    assert missing.status_code == 404
    assert missing.get_json()["context"] == {"sprite_id": 999}
