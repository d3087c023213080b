from .auth_controller import AuthController
from .sprites_controller import SpritesController

__all__ = ["AuthController", "SpritesController"]
