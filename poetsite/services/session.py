"""Signed session claims: issue, decode, and refresh from the user store."""

import logging
from dataclasses import dataclass
from typing import Any

import jwt
from sqlalchemy.orm import Session

from poetsite.core.auth_config import AuthConfig
from poetsite.core.roles import parse_role
from poetsite.core.security import create_session_token, decode_session_token
from poetsite.models import User
from poetsite.schemas.auth import AuthenticatedUser, SessionUser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionClaim:
    """Decoded cookie payload. Trusted only after signature and expiry checks."""

    user_id: int
    role: str
    name: str | None


def issue_session(identity: AuthenticatedUser | SessionUser, config: AuthConfig) -> str:
    """Sign a session token embedding the user's id, role and name."""
    return create_session_token(
        identity.id,
        identity.role.value,
        identity.name,
        secret=config.secret,
        algorithm=config.algorithm,
        expire_minutes=config.expire_minutes,
    )


def read_session_claim(token: str | None, config: AuthConfig) -> SessionClaim | None:
    """Decode a session token without touching the store; None if absent or invalid."""
    if not token:
        return None
    try:
        payload: dict[str, Any] = decode_session_token(
            token, secret=config.secret, algorithm=config.algorithm
        )
    except jwt.PyJWTError:
        return None
    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        return None
    role = payload.get("role")
    if parse_role(role) is None:
        return None
    return SessionClaim(user_id=user_id, role=role, name=payload.get("name"))


def refresh_session(db: Session, claim: SessionClaim) -> SessionUser | None:
    """
    Re-derive the session user from the store so role changes apply on the next request.

    A vanished or soft-deleted account yields no session.
    """
    user = db.query(User).filter(User.id == claim.user_id).first()
    if user is None or user.is_deleted:
        logger.info("Session for account %s dropped: account missing or deleted", claim.user_id)
        return None
    role = parse_role(user.role)
    if role is None:
        logger.warning("Session for account %s dropped: unknown stored role %r", user.id, user.role)
        return None
    return SessionUser(
        id=user.id,
        role=role,
        name=user.name,
        email=user.email,
        image=user.image,
    )


def claim_is_stale(claim: SessionClaim, current: SessionUser) -> bool:
    """True when the signed claim no longer matches the stored role or name."""
    return claim.role != current.role.value or claim.name != current.name
