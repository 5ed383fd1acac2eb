"""Credential verification and the sign-in callback."""

import logging

from sqlalchemy.orm import Session

from poetsite.core.errors import AccountDeleted, InvalidCredentials, MissingCredentials
from poetsite.core.security import verify_password
from poetsite.models import User
from poetsite.schemas.auth import AuthenticatedUser

logger = logging.getLogger(__name__)


def assert_account_active(user: User) -> None:
    """Raise AccountDeleted for a soft-deleted account. Every sign-in path calls this."""
    if user.is_deleted:
        raise AccountDeleted()


def verify_credentials(db: Session, email: str | None, password: str | None) -> AuthenticatedUser:
    """
    Check email/password against the stored bcrypt hash.

    Checks run in order and the first failure wins: missing field, unknown
    email or no local password, soft-deleted account, wrong password.
    Unknown email and wrong password raise the same InvalidCredentials message.
    Reads only; nothing is written.
    """
    if not email or not password:
        raise MissingCredentials()

    user = db.query(User).filter(User.email == email).first()
    if user is None or not user.password_hash:
        logger.info("Sign-in rejected: unknown email or no local password")
        raise InvalidCredentials()

    try:
        assert_account_active(user)
    except AccountDeleted:
        logger.warning("Sign-in rejected: account %s is deleted", user.id)
        raise

    if not verify_password(password, user.password_hash):
        logger.info("Sign-in rejected: wrong password for account %s", user.id)
        raise InvalidCredentials()

    return AuthenticatedUser(
        id=user.id,
        email=user.email,
        name=user.name,
        image=user.image,
        role=user.role,
    )


def complete_sign_in(db: Session, identity: AuthenticatedUser) -> None:
    """
    Sign-in callback, run after verify_credentials and before a session is issued.

    Re-reads the account by email and checks the soft-delete flag a second time.
    """
    user = db.query(User).filter(User.email == identity.email).first()
    if user is None:
        raise InvalidCredentials()
    try:
        assert_account_active(user)
    except AccountDeleted:
        logger.warning("Sign-in blocked at callback: account %s is deleted", user.id)
        raise
    logger.info("Sign-in succeeded for account %s (role=%s)", user.id, user.role)
