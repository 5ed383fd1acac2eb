"""ORM model for gallery images."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from poetsite.models.base import Base, ContentStatus


class GalleryImage(Base):
    """Gallery image; submitted_by is NULL for images uploaded from the back-office."""

    __tablename__ = "gallery_images"

    id = Column(Integer, primary_key=True, autoincrement=True)
    url = Column(String(2048), nullable=False)
    title = Column(String(500), nullable=True)
    description = Column(Text, nullable=True)
    year = Column(String(16), nullable=True)
    location = Column(String(255), nullable=True)
    status = Column(String(16), nullable=False, default=ContentStatus.PENDING.value, index=True)
    submitted_by = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
