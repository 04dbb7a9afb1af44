"""Password hashing and JWT signing/verification for authentication."""

from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import bcrypt
import jwt

from maintenance.core.config import HMAC_ALGORITHMS, Settings

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12


class SigningKeyError(RuntimeError):
    """Raised when the token signing key cannot be read."""


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; longer inputs are truncated.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    try:
        pw_bytes = plain_password.encode("utf-8")[:72]
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def read_signing_key(path: str | Path) -> bytes:
    """Read the symmetric signing key from disk. Called on every sign/verify."""
    try:
        key = Path(path).read_bytes()
    except OSError as e:
        raise SigningKeyError(f"Error while reading private key: {e.strerror}") from e
    if not key:
        raise SigningKeyError("Private key file is empty")
    return key


def create_access_token(username: str, settings: Settings) -> str:
    """Create a JWT carrying the username, issuer, iat and exp claims."""
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "username": username,
        "iss": settings.JWT_ISSUER,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(
        payload,
        read_signing_key(settings.JWT_KEY_PATH),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str, settings: Settings) -> dict[str, Any]:
    """
    Decode and validate a JWT; return its payload.
    Raises jwt.PyJWTError on a bad signature, expired token, wrong issuer or a
    non-HMAC signing method, and SigningKeyError when the key is unreadable.
    """
    return jwt.decode(
        token,
        read_signing_key(settings.JWT_KEY_PATH),
        algorithms=list(HMAC_ALGORITHMS),
        issuer=settings.JWT_ISSUER,
        options={"require": ["exp", "iss", "username"]},
    )
