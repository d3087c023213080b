from .memory_sprite_repository import InMemorySpriteRepository

__all__ = ["InMemorySpriteRepository"]
