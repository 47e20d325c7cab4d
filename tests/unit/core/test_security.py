"""Unit tests for credential helpers."""

import bcrypt

from src.contact_api.core.security import generate_api_token, hash_password


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("secret")

        assert hashed != "secret"
        assert hashed.startswith("$2")

    def test_hash_checks_against_original_password(self):
        hashed = hash_password("secret").encode("utf-8")

        assert bcrypt.checkpw(b"secret", hashed)
        assert not bcrypt.checkpw(b"wrong", hashed)

    def test_hash_uses_configured_rounds(self):
        # fast_password_hashing fixture sets the cost to 4
        assert hash_password("secret").split("$")[2] == "04"


class TestTokens:
    def test_tokens_are_unique(self):
        tokens = {generate_api_token() for _ in range(20)}

        assert len(tokens) == 20
        assert all(len(token) >= 32 for token in tokens)
