"""Password hashing and signed session token creation/verification."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from poetsite.core.config import settings

# Min/max lengths for password validation.
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash (constant-time in bcrypt)."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_session_token(
    sub: str | int,
    role: str,
    name: str | None,
    *,
    secret: str,
    algorithm: str,
    expire_minutes: int,
) -> str:
    """Create a signed token with sub (user id), role, name, iat and exp."""
    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": str(sub),
        "role": role,
        "name": name,
        "iat": now,
        "exp": now + timedelta(minutes=expire_minutes),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_session_token(token: str, *, secret: str, algorithm: str) -> dict[str, Any]:
    """
    Decode and validate a session token; return payload (sub, role, name, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    return jwt.decode(token, secret, algorithms=[algorithm])
