"""ORM model for the poet's writings (poems, songs, essays)."""

from enum import Enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from poetsite.models.base import Base, ContentStatus


class WritingType(str, Enum):
    POEM = "POEM"
    SONG = "SONG"
    ESSAY = "ESSAY"
    RHYME = "RHYME"
    ARTICLE = "ARTICLE"


class Writing(Base):
    __tablename__ = "writings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(500), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    content = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=True)
    type = Column(String(16), nullable=False, default=WritingType.POEM.value, index=True)
    status = Column(String(16), nullable=False, default=ContentStatus.DRAFT.value, index=True)
    year = Column(String(16), nullable=True)
    views = Column(Integer, nullable=False, default=0)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
