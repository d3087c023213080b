from .auth import LoginRequestDTO, RegisterRequestDTO
from .sprites import CreateSpriteDTO, UpdateSpriteDTO

__all__ = [
    "CreateSpriteDTO",
    "LoginRequestDTO",
    "RegisterRequestDTO",
    "UpdateSpriteDTO",
]
