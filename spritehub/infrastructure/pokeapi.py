# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import httpx

from spritehub.domain.sprites.entities import SpriteData
from spritehub.domain.sprites.exceptions import (
    PokeApiError,
    PokeApiTimeoutError,
    PokemonNotFoundUpstreamError,
)
from spritehub.domain.sprites.repositories import SpriteSource
from spritehub.shared.logging import logger


class PokeApiClient(SpriteSource):
    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client

    def _get(self, url: str) -> httpx.Response:
        if self._client is not None:
            return self._client.get(url, timeout=self._timeout)
        with httpx.Client(timeout=self._timeout) as client:
            return client.get(url)

    def fetch(self, pokemon_id: int) -> SpriteData:
        url = f"{self._base_url}/pokemon/{pokemon_id}"
        try:
            response = self._get(url)
        except httpx.TimeoutException as exc:
            logger.warning(f"pokeapi.fetch: timeout pokemon_id={pokemon_id}")
            raise PokeApiTimeoutError() from exc
        except httpx.HTTPError as exc:
            logger.warning(f"pokeapi.fetch: transport error pokemon_id={pokemon_id}: {type(exc).__name__}")
            raise PokeApiError() from exc

        if response.status_code == 404:
            logger.warning(f"pokeapi.fetch: not found pokemon_id={pokemon_id}")
            raise PokemonNotFoundUpstreamError()
        if response.status_code != 200:
            logger.warning(f"pokeapi.fetch: status={response.status_code} pokemon_id={pokemon_id}")
            raise PokeApiError()

        try:
            payload = response.json()
        except ValueError as exc:
            raise PokeApiError() from exc

        name = payload.get("name") if isinstance(payload, dict) else None
        sprites = payload.get("sprites") if isinstance(payload, dict) else None
        front = sprites.get("front_default") if isinstance(sprites, dict) else None
        if not name or not front:
            logger.warning(f"pokeapi.fetch: invalid payload pokemon_id={pokemon_id}")
            raise PokeApiError()

        return SpriteData(url=str(front), name=str(name))


__all__ = ["PokeApiClient"]
