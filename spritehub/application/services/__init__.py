from .password_hashing import WerkzeugPasswordHasher
from .sprite_service import SpriteService
from .tokens import JwtTokenService

__all__ = ["JwtTokenService", "SpriteService", "WerkzeugPasswordHasher"]
