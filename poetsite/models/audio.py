"""ORM model for audio recordings (recitations, songs)."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from poetsite.models.base import Base, ContentStatus


class Audio(Base):
    """Audio track; user submissions start as PENDING."""

    __tablename__ = "audios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(500), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    audio_url = Column(String(2048), nullable=False)
    artist = Column(String(255), nullable=True)
    album = Column(String(255), nullable=True)
    duration = Column(String(32), nullable=True)
    cover_image = Column(String(2048), nullable=True)
    lyrics = Column(Text, nullable=True)
    status = Column(String(16), nullable=False, default=ContentStatus.PENDING.value, index=True)
    submitted_by = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
