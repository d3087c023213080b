from .authenticate_token import AuthenticateTokenUseCase
from .get_profile import GetProfileUseCase
from .login_user import LoginUserUseCase
from .register_user import RegisterUserUseCase

__all__ = [
    "AuthenticateTokenUseCase",
    "GetProfileUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
]
