"""Unit tests for PasswordHasher."""

from askit.util.password import PasswordHasher

hasher = PasswordHasher(rounds=4)


def test_hash_verifies_only_the_original_password():
    password_hash = hasher.hash("Secret123")

    assert password_hash != "Secret123"
    assert hasher.verify("Secret123", password_hash)
    assert not hasher.verify("Secret124", password_hash)


def test_malformed_hash_does_not_verify():
    assert not hasher.verify("Secret123", "not-a-bcrypt-hash")


def test_passwords_longer_than_72_bytes_are_truncated():
    long_password = "A1" + "x" * 100

    password_hash = hasher.hash(long_password)

    assert hasher.verify(long_password[:72] + "different tail", password_hash)
