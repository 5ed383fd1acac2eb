"""ORM model for visitor tributes."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from poetsite.models.base import Base, ContentStatus


class Tribute(Base):
    __tablename__ = "tributes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    content = Column(Text, nullable=False)
    district = Column(String(255), nullable=True)
    status = Column(String(16), nullable=False, default=ContentStatus.PENDING.value, index=True)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
