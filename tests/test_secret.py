"""Tests for secret hashing and verification."""

from diary.core.secret import DIGEST_LENGTH, hash_secret, verify_secret


class TestHashSecret:
    def test_deterministic(self):
        assert hash_secret("correct-horse-battery") == hash_secret("correct-horse-battery")

    def test_fixed_length_lowercase_hex(self):
        for secret in ["", "a", "correct-horse-battery", "x" * 10_000, "ünïcødé"]:
            digest = hash_secret(secret)
            assert len(digest) == DIGEST_LENGTH
            assert digest == digest.lower()
            int(digest, 16)

    def test_known_sha256_value(self):
        assert hash_secret("abc") == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_different_secrets_different_digests(self):
        assert hash_secret("password1") != hash_secret("password2")


class TestVerifySecret:
    def test_matching_secret(self):
        assert verify_secret("my-secret", hash_secret("my-secret")) is True

    def test_wrong_secret(self):
        assert verify_secret("not-my-secret", hash_secret("my-secret")) is False

    def test_empty_stored_digest_never_verifies(self):
        assert verify_secret("", "") is False
        assert verify_secret("anything", "") is False
