# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import PokemonSprite, SpriteData
from .exceptions import (
    PokeApiError,
    PokeApiTimeoutError,
    PokemonNotFoundUpstreamError,
    SpriteNotFoundError,
)
from .repositories import SpriteRepository, SpriteSource

__all__ = [
    "PokeApiError",
    "PokeApiTimeoutError",
    "PokemonNotFoundUpstreamError",
    "PokemonSprite",
    "SpriteData",
    "SpriteNotFoundError",
    "SpriteRepository",
    "SpriteSource",
]
