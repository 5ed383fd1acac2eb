"""ORM model for site accounts (auth, profile and RBAC)."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, func

from poetsite.core.roles import Role
from poetsite.models.base import Base


class User(Base):
    """
    Site account.

    password_hash is NULL for externally provisioned accounts, which therefore
    cannot sign in with a password. is_deleted is the soft-delete flag; the row
    is kept so authored content stays attached.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=True)
    name = Column(String(255), nullable=True)
    username = Column(String(64), nullable=True, unique=True, index=True)
    last_username_change = Column(DateTime(timezone=True), nullable=True)
    image = Column(String(2048), nullable=True)
    bio = Column(Text, nullable=True)
    role = Column(String(32), nullable=False, default=Role.USER.value)
    is_deleted = Column(Boolean, nullable=False, default=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)
    notify_updates = Column(Boolean, nullable=False, default=True)
    notify_comments = Column(Boolean, nullable=False, default=True)
    notify_submission = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
