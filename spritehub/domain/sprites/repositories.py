# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import PokemonSprite, SpriteData


class SpriteRepository(Protocol):
    def add(self, data: SpriteData) -> PokemonSprite: ...
    def list(self) -> Sequence[PokemonSprite]: ...
    def get(self, sprite_id: int) -> PokemonSprite | None: ...
    def update(
        self, sprite_id: int, *, url: str | None = None, name: str | None = None
    ) -> PokemonSprite | None: ...
    def remove(self, sprite_id: int) -> bool: ...
    def clear(self) -> int: ...


class SpriteSource(Protocol):
    # Raises PokeApiError subclasses on upstream failure.
    def fetch(self, pokemon_id: int) -> SpriteData: ...
