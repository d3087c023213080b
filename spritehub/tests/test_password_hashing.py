from __future__ import annotations

from spritehub.application.services.password_hashing import WerkzeugPasswordHasher


def _hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")


def test_hash_is_salted_and_verifies() -> None:
    hasher = _hasher()

    first = hasher.hash("pw123456")
    second = hasher.hash("pw123456")

    assert first != second
    assert "pw123456" not in first
    assert hasher.verify("pw123456", first)
    assert hasher.verify("pw123456", second)


def test_wrong_password_does_not_verify() -> None:
    hasher = _hasher()

    assert not hasher.verify("wrong", hasher.hash("pw123456"))


def test_malformed_digest_does_not_verify() -> None:
    assert not _hasher().verify("pw123456", "not-a-digest")


def test_digest_from_older_cost_still_verifies() -> None:
    old = WerkzeugPasswordHasher(method="pbkdf2:sha256:500").hash("pw123456")

    assert _hasher().verify("pw123456", old)
