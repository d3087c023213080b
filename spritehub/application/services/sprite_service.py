# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import random
from collections.abc import Callable, Sequence

from spritehub.domain.sprites.entities import PokemonSprite, SpriteData
from spritehub.domain.sprites.exceptions import SpriteNotFoundError
from spritehub.domain.sprites.repositories import SpriteRepository, SpriteSource
from spritehub.shared.logging import logger


class SpriteService:
    def __init__(
        self,
        *,
        sprites: SpriteRepository,
        source: SpriteSource,
        max_pokemon_id: int = 898,
        pick_id: Callable[[int, int], int] = random.randint,
    ) -> None:
        self._sprites = sprites
        self._source = source
        self._max_pokemon_id = max_pokemon_id
        self._pick_id = pick_id

    def fetch_random(self) -> PokemonSprite:
        pokemon_id = self._pick_id(1, self._max_pokemon_id)
        logger.info(f"sprites.random: fetching pokemon_id={pokemon_id}")
        data = self._source.fetch(pokemon_id)
        sprite = self._sprites.add(data)
        logger.info(f"sprites.random: ok id={sprite.id} name={sprite.name}")
        return sprite

    def create(self, url: str, name: str) -> PokemonSprite:
        sprite = self._sprites.add(SpriteData(url=url, name=name))
        logger.info(f"sprites.create: ok id={sprite.id} name={sprite.name}")
        return sprite

    def list(self) -> Sequence[PokemonSprite]:
        return self._sprites.list()

    def get(self, sprite_id: int) -> PokemonSprite:
        sprite = self._sprites.get(sprite_id)
        if sprite is None:
            raise SpriteNotFoundError(sprite_id)
        return sprite

    def update(
        self, sprite_id: int, *, url: str | None = None, name: str | None = None
    ) -> PokemonSprite:
        sprite = self._sprites.update(sprite_id, url=url or None, name=name or None)
        if sprite is None:
            logger.warning(f"sprites.update: not found id={sprite_id}")
            raise SpriteNotFoundError(sprite_id)
        logger.info(f"sprites.update: ok id={sprite_id}")
        return sprite

    def remove(self, sprite_id: int) -> dict[str, object]:
        deleted = self._sprites.remove(sprite_id)
        if deleted:
            logger.info(f"sprites.remove: ok id={sprite_id}")
        else:
            logger.warning(f"sprites.remove: not found id={sprite_id}")
        return {"deleted": deleted, "id": sprite_id}

    def remove_all(self) -> dict[str, object]:
        count = self._sprites.clear()
        logger.info(f"sprites.remove_all: ok count={count}")
        return {"deleted": True, "count": count}
