"""ORM model for content categories."""

from sqlalchemy import Column, Integer, String

from poetsite.models.base import Base


class Category(Base):
    """Category shared by writings and blog posts; type is POEM, SONG, ESSAY or BLOG."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    type = Column(String(16), nullable=False, default="BLOG")
