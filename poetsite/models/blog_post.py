"""ORM model for blog posts (admin-authored or user-submitted)."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from poetsite.models.base import Base, ContentStatus


class BlogPost(Base):
    """Blog post; user submissions start as PENDING until a moderator approves them."""

    __tablename__ = "blog_posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(500), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    content = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=True)
    cover_image = Column(String(2048), nullable=True)
    status = Column(String(16), nullable=False, default=ContentStatus.PENDING.value, index=True)
    views = Column(Integer, nullable=False, default=0)
    published_at = Column(DateTime(timezone=True), nullable=True)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    category = relationship("Category", lazy="joined")
    author = relationship("User", lazy="joined")
