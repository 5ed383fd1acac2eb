"""ORM model for YouTube-hosted videos."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from poetsite.models.base import Base, ContentStatus


class Video(Base):
    __tablename__ = "videos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(500), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    youtube_id = Column(String(64), nullable=False)
    description = Column(Text, nullable=True)
    duration = Column(String(32), nullable=True)
    category = Column(String(255), nullable=True)
    thumbnail = Column(String(2048), nullable=True)
    status = Column(String(16), nullable=False, default=ContentStatus.PENDING.value, index=True)
    submitted_by = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
