"""Account lifecycle: registration, profile updates, password change, soft delete, roles."""

import logging
import re
import time
from datetime import UTC, datetime, timedelta

from sqlalchemy.orm import Session

from poetsite.core.errors import Conflict, Forbidden, NotFound, ValidationFailed
from poetsite.core.roles import Role, role_level
from poetsite.core.security import PASSWORD_MIN_LEN, hash_password, verify_password
from poetsite.models import Subscriber, User
from poetsite.schemas.auth import RegisterRequest, SessionUser
from poetsite.schemas.profile import PasswordChange, ProfileUpdate

logger = logging.getLogger(__name__)

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")
DELETED_USER_NAME = "Deleted User"


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=UTC)


def _load(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFound("ব্যবহারকারী পাওয়া যায়নি")
    return user


def register_user(db: Session, body: RegisterRequest) -> User:
    """Create a USER account with a local password."""
    if len(body.password) < PASSWORD_MIN_LEN:
        raise ValidationFailed("পাসওয়ার্ড অন্তত ৬ অক্ষরের হতে হবে")
    email = body.email.strip()
    if db.query(User.id).filter(User.email == email).first() is not None:
        raise ValidationFailed("এই ইমেইল দিয়ে ইতিমধ্যে একটি একাউন্ট আছে")

    user = User(
        name=body.name.strip(),
        email=email,
        password_hash=hash_password(body.password),
        role=Role.USER.value,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered account %s", user.id)
    return user


def _check_username(db: Session, user: User, username: str, cooldown_days: int) -> bool:
    """Validate a requested username; returns False when it is unchanged."""
    if not USERNAME_PATTERN.match(username):
        raise ValidationFailed(
            "ইউজারনেম শুধুমাত্র ইংরেজি অক্ষর, সংখ্যা এবং হাইফেন (-) হতে পারে"
        )
    if user.username == username:
        return False
    if user.last_username_change is not None:
        allowed_after = _as_utc(user.last_username_change) + timedelta(days=cooldown_days)
        if datetime.now(UTC) < allowed_after:
            raise Forbidden("আপনি ৩ মাসের মধ্যে একবারই ইউজারনেম পরিবর্তন করতে পারবেন")
    taken = db.query(User.id).filter(User.username == username, User.id != user.id).first()
    if taken is not None:
        raise Conflict("এই ইউজারনেমটি ইতিমধ্যে ব্যবহৃত হচ্ছে")
    return True


def _set_newsletter(db: Session, email: str, subscribed: bool) -> None:
    subscriber = db.query(Subscriber).filter(Subscriber.email == email).first()
    if subscriber is not None:
        subscriber.is_active = subscribed
    elif subscribed:
        db.add(Subscriber(email=email, is_active=True))


def update_profile(
    db: Session, session_user: SessionUser, body: ProfileUpdate, cooldown_days: int
) -> User:
    """Apply profile changes. All checks run before anything is written."""
    user = _load(db, session_user.id)

    username_changed = False
    if body.username is not None:
        username_changed = _check_username(db, user, body.username, cooldown_days)

    if body.name:
        user.name = body.name
    if body.bio is not None:
        user.bio = body.bio
    if body.image is not None:
        user.image = body.image
    if username_changed:
        user.username = body.username
        user.last_username_change = datetime.now(UTC)

    prefs = body.notifications
    if prefs is not None:
        if prefs.email_notifications is not None:
            user.notify_updates = prefs.email_notifications
        if prefs.new_comments is not None:
            user.notify_comments = prefs.new_comments
        if prefs.submission_status is not None:
            user.notify_submission = prefs.submission_status
        if prefs.newsletter is not None:
            _set_newsletter(db, user.email, prefs.newsletter)

    db.commit()
    db.refresh(user)
    return user


def change_password(db: Session, session_user: SessionUser, body: PasswordChange) -> None:
    if not body.current_password or not body.new_password:
        raise ValidationFailed("বর্তমান এবং নতুন পাসওয়ার্ড দিন")
    if len(body.new_password) < PASSWORD_MIN_LEN:
        raise ValidationFailed("নতুন পাসওয়ার্ড অন্তত ৬ অক্ষরের হতে হবে")
    user = _load(db, session_user.id)
    if not user.password_hash:
        raise ValidationFailed("এই অ্যাকাউন্টে পাসওয়ার্ড সেট করা নেই")
    if not verify_password(body.current_password, user.password_hash):
        raise ValidationFailed("বর্তমান পাসওয়ার্ড সঠিক নয়")
    user.password_hash = hash_password(body.new_password)
    db.commit()
    logger.info("Password changed for account %s", user.id)


def soft_delete_account(db: Session, session_user: SessionUser) -> None:
    """
    Mark the account deleted and strip personal data. Authored content stays.

    The email is rewritten so the freed address can register again.
    """
    user = _load(db, session_user.id)
    user.is_deleted = True
    user.deleted_at = datetime.now(UTC)
    user.email = f"deleted-{time.time_ns() // 1_000_000}-{user.id}@deleted.com"
    user.username = None
    user.name = DELETED_USER_NAME
    user.image = None
    user.bio = None
    user.notify_updates = False
    user.notify_comments = False
    user.notify_submission = False
    db.commit()
    logger.info("Account %s soft-deleted", user.id)


def change_role(db: Session, actor: SessionUser, target_id: int, new_role: Role) -> User:
    """
    Change another account's role within the hierarchy.

    The actor's role is re-read from the store. The actor must be ADMIN or
    above, may not change their own role, may only touch accounts strictly
    below them, and may only grant roles strictly below their own.
    """
    current = _load(db, actor.id)
    actor_level = role_level(current.role)
    if actor_level < role_level(Role.ADMIN):
        raise Forbidden()
    if target_id == actor.id:
        raise ValidationFailed("নিজের রোল নিজে পরিবর্তন করা যাবে না")

    target = _load(db, target_id)
    if role_level(target.role) >= actor_level:
        raise Forbidden("আপনার সমপর্যায় বা উপরের কারো রোল পরিবর্তন করতে পারবেন না")
    if role_level(new_role) >= actor_level:
        raise Forbidden("আপনার নিজের রোলের সমান বা উপরে কাউকে প্রমোট করতে পারবেন না")

    target.role = new_role.value
    db.commit()
    db.refresh(target)
    logger.info("Account %s changed role of %s to %s", actor.id, target.id, new_role.value)
    return target


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id).all()
