"""
NoteKeeper Backend — Credentials and Session Tokens
=====================================================

What:  Password hashing/verification and session token generation.
How:   passlib's CryptContext with the pbkdf2_sha256 scheme (salted, pure
       Python, no native backend) and `secrets.token_urlsafe` for tokens.
Who:   UserService (hash on signup, verify on login) and SessionRegistry
       (token on login).
"""

import secrets

from passlib.context import CryptContext

from notekeeper.config import settings


def _build_context() -> CryptContext:
    options = {}
    if settings.password_hash_rounds:
        options["pbkdf2_sha256__rounds"] = settings.password_hash_rounds
    return CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto", **options)


pwd_context = _build_context()


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh random salt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plaintext password against its stored hash.

    A malformed or foreign hash string counts as a mismatch.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def generate_session_token() -> str:
    """Cryptographically random, url-safe opaque session token."""
    return secrets.token_urlsafe(settings.session_token_bytes)
