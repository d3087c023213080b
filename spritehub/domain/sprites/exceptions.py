# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from spritehub.shared.errors.base import DomainError


class SpriteNotFoundError(DomainError):
    code = "sprite_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Sprite not found"

    def __init__(self, sprite_id: int) -> None:
        super().__init__(context={"sprite_id": sprite_id})


class PokeApiError(DomainError):
    code = "pokeapi_unavailable"
    status = HTTPStatus.BAD_GATEWAY
    message = "Unable to fetch pokemon from external API"


class PokeApiTimeoutError(PokeApiError):
    message = "Request to PokeAPI timed out"


class PokemonNotFoundUpstreamError(PokeApiError):
    message = "Pokemon not found in PokeAPI"
