"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from spritehub.domain.users.repositories import PasswordHasher

DEFAULT_METHOD = "pbkdf2:sha256:600000"


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted, self-describing digests (``method$salt$hash``).

    The salt is generated per call; the method string carries the cost, so a
    digest produced under an older cost still verifies after it is raised.
    """

    def __init__(self, method: str = DEFAULT_METHOD, salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        return str(
            generate_password_hash(password, method=self._method, salt_length=self._salt_length)
        )

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError):
            return False
