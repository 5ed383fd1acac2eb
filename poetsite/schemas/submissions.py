"""
Schemas for user-generated content: blog posts, tributes, gallery images, audio and video.

Submissions are a tagged union on ``kind``. Every variant accepts a ``status``
field, but it is honoured only for administrative authors.
"""

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from poetsite.models.base import ContentStatus

SubmissionKind = Literal["blog", "tribute", "gallery", "audio", "video"]


class BlogSubmission(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["blog"] = "blog"
    title: str = Field(..., max_length=500)
    content: str = Field(..., max_length=200_000)
    slug: str | None = Field(default=None, max_length=255)
    excerpt: str | None = Field(default=None, max_length=2000)
    cover_image: str | None = Field(default=None, max_length=2048)
    category_name: str | None = Field(default=None, max_length=255)
    status: ContentStatus | None = None


class TributeSubmission(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["tribute"]
    content: str = Field(..., max_length=5000)
    district: str | None = Field(default=None, max_length=255)
    status: ContentStatus | None = None


class GallerySubmission(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["gallery"]
    url: str = Field(..., min_length=1, max_length=2048)
    title: str | None = Field(default=None, max_length=500)
    description: str | None = Field(default=None, max_length=5000)
    year: str | None = Field(default=None, max_length=16)
    location: str | None = Field(default=None, max_length=255)
    status: ContentStatus | None = None


class AudioSubmission(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["audio"]
    title: str = Field(..., max_length=500)
    audio_url: str = Field(..., max_length=2048)
    artist: str | None = Field(default=None, max_length=255)
    album: str | None = Field(default=None, max_length=255)
    duration: str | None = Field(default=None, max_length=32)
    cover_image: str | None = Field(default=None, max_length=2048)
    lyrics: str | None = Field(default=None, max_length=50_000)
    status: ContentStatus | None = None


class VideoSubmission(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["video"]
    title: str = Field(..., max_length=500)
    youtube_url: str = Field(..., max_length=2048, description="watch URL, youtu.be link or bare id")
    description: str | None = Field(default=None, max_length=5000)
    duration: str | None = Field(default=None, max_length=32)
    category: str | None = Field(default=None, max_length=255)
    status: ContentStatus | None = None


SubmissionRequest = Annotated[
    Union[BlogSubmission, TributeSubmission, GallerySubmission, AudioSubmission, VideoSubmission],
    Field(discriminator="kind"),
]


class SubmissionResponse(BaseModel):
    kind: SubmissionKind
    id: int
    status: ContentStatus
    slug: str | None = None
    message: str


class BlogPostItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    slug: str
    title: str
    excerpt: str | None = None
    status: ContentStatus
    views: int
    cover_image: str | None = None
    created_at: datetime
    published_at: datetime | None = None


class BlogPostListResponse(BaseModel):
    posts: list[BlogPostItem]
    total: int
    page: int
    limit: int
    total_pages: int


class ModerationResponse(BaseModel):
    kind: SubmissionKind
    id: int
    status: ContentStatus
    message: str


class PublicAuthor(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None = None
    image: str | None = None
    bio: str | None = None


class PublicBlogPost(BaseModel):
    """Published post as shown on the public blog page."""

    id: int
    slug: str
    title: str
    excerpt: str | None = None
    cover_image: str | None = None
    views: int
    published_at: datetime
    author: PublicAuthor
    category: str


class PublicBlogListResponse(BaseModel):
    posts: list[PublicBlogPost]
    total: int
    page: int
    limit: int
    total_pages: int
