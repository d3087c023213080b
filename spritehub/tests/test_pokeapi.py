from __future__ import annotations

import httpx
import pytest

from spritehub.domain.sprites.exceptions import (
    PokeApiError,
    PokeApiTimeoutError,
    PokemonNotFoundUpstreamError,
)
from spritehub.infrastructure.pokeapi import PokeApiClient


def _client(handler) -> PokeApiClient:
    return PokeApiClient(
        "https://pokeapi.test/api/v2/",
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


def test_fetch_maps_payload() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(
            200,
            json={"name": "pikachu", "sprites": {"front_default": "https://img/25.png"}},
        )

    data = _client(handler).fetch(25)

    assert seen == ["https://pokeapi.test/api/v2/pokemon/25"]
    assert data.name == "pikachu"
    assert data.url == "https://img/25.png"


def test_fetch_not_found_upstream() -> None:
    client = _client(lambda request: httpx.Response(404, text="Not Found"))

    with pytest.raises(PokemonNotFoundUpstreamError) as exc_info:
        client.fetch(9999)

    assert exc_info.value.message == "Pokemon not found in PokeAPI"


def test_fetch_timeout() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(PokeApiTimeoutError):
        _client(handler).fetch(1)


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, text="boom"),
        httpx.Response(200, text="not json"),
        httpx.Response(200, json={"name": "missingno"}),
        httpx.Response(200, json={"sprites": {"front_default": "https://img/1.png"}}),
        httpx.Response(200, json={"name": "x", "sprites": {"front_default": None}}),
    ],
)
def test_fetch_invalid_upstream_response(response: httpx.Response) -> None:
    with pytest.raises(PokeApiError) as exc_info:
        _client(lambda request: response).fetch(1)

    assert exc_info.value.message == "Unable to fetch pokemon from external API"


def test_fetch_connection_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(PokeApiError):
        _client(handler).fetch(1)
