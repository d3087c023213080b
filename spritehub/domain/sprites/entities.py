# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class PokemonSprite:

    id: int
    url: str
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "url": self.url, "name": self.name}


@dataclass(slots=True, frozen=True)
class SpriteData:
    """Sprite fields as delivered by an upstream source, before an id is assigned."""

    url: str
    name: str
