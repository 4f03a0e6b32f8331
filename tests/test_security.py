"""Tests for password hashing."""

import pytest

from shop_api.app.core.security import ALGORITHM, hash_password, verify_password


def test_hash_is_not_plaintext_and_embeds_parameters() -> None:
    digest = hash_password("s3cret!", iterations=1000)

    assert "s3cret!" not in digest
    algorithm, rounds, salt_hex, hash_hex = digest.split("$")
    assert algorithm == ALGORITHM
    assert rounds == "1000"
    assert len(salt_hex) == 32
    assert len(hash_hex) == 64


def test_verify_accepts_correct_password() -> None:
    digest = hash_password("s3cret!", iterations=1000)

    assert verify_password("s3cret!", digest)
    assert not verify_password("wrong-one", digest)


def test_same_password_hashes_differently() -> None:
    assert hash_password("s3cret!", iterations=1000) != hash_password("s3cret!", iterations=1000)


@pytest.mark.parametrize("digest", ["", "plain", "md5$1$00$00", "pbkdf2_sha256$x$00$00", "pbkdf2_sha256$10$zz$00"])
def test_malformed_digest_never_verifies(digest: str) -> None:
    assert verify_password("s3cret!", digest) is False


def test_short_password_is_rejected() -> None:
    with pytest.raises(ValueError):
        hash_password("short")
