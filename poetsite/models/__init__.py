"""SQLAlchemy ORM models."""

from poetsite.models.audio import Audio
from poetsite.models.base import Base, ContentStatus
from poetsite.models.blog_post import BlogPost
from poetsite.models.category import Category
from poetsite.models.comment import Comment
from poetsite.models.gallery_image import GalleryImage
from poetsite.models.subscriber import Subscriber
from poetsite.models.tribute import Tribute
from poetsite.models.user import User
from poetsite.models.video import Video
from poetsite.models.writing import Writing, WritingType

__all__ = [
    "Audio",
    "Base",
    "BlogPost",
    "Category",
    "Comment",
    "ContentStatus",
    "GalleryImage",
    "Subscriber",
    "Tribute",
    "User",
    "Video",
    "Writing",
    "WritingType",
]
