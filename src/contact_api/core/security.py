"""Credential helpers: password hashing and API token generation."""

import secrets

import bcrypt

from src.contact_api.runtime.context import get_config


def hash_password(password: str) -> str:
    """Hash a clear-text password with bcrypt using the configured cost."""
    rounds = get_config().security.bcrypt_rounds
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def generate_api_token() -> str:
    """Return a fresh opaque API token."""
    return secrets.token_urlsafe(32)
