"""SQLAlchemy declarative Base and shared model configuration."""

from enum import Enum

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass


class ContentStatus(str, Enum):
    """Publication state shared by writings, blog posts and submissions."""

    DRAFT = "DRAFT"
    PENDING = "PENDING"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"
