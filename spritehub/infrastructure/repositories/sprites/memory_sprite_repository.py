# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import itertools
from collections.abc import Sequence
from dataclasses import replace
from threading import Lock

from spritehub.domain.sprites.entities import PokemonSprite, SpriteData
from spritehub.domain.sprites.repositories import SpriteRepository


class InMemorySpriteRepository(SpriteRepository):
    """Process-local sprite list; ids come from a counter, never the clock."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._ids = itertools.count(1)
        self._sprites: dict[int, PokemonSprite] = {}

    def add(self, data: SpriteData) -> PokemonSprite:
        with self._lock:
            sprite = PokemonSprite(id=next(self._ids), url=data.url, name=data.name)
            self._sprites[sprite.id] = sprite
            return sprite

    def list(self) -> Sequence[PokemonSprite]:
        with self._lock:
            return list(self._sprites.values())

    def get(self, sprite_id: int) -> PokemonSprite | None:
        with self._lock:
            return self._sprites.get(sprite_id)

    def update(
        self, sprite_id: int, *, url: str | None = None, name: str | None = None
    ) -> PokemonSprite | None:
        with self._lock:
            current = self._sprites.get(sprite_id)
            if current is None:
                return None
            updated = replace(
                current,
                url=url if url is not None else current.url,
                name=name if name is not None else current.name,
            )
            self._sprites[sprite_id] = updated
            return updated

    def remove(self, sprite_id: int) -> bool:
        with self._lock:
            return self._sprites.pop(sprite_id, None) is not None

    def clear(self) -> int:
        with self._lock:
            count = len(self._sprites)
            self._sprites.clear()
            return count
