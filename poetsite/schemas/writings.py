"""Schemas for the poet's writings."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from poetsite.models.base import ContentStatus
from poetsite.models.writing import WritingType


class WritingCreate(BaseModel):
    """Admin-authored writing; slug is derived from the title when omitted."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=500)
    content: str = Field(..., min_length=1)
    slug: str | None = Field(default=None, max_length=255)
    excerpt: str | None = None
    type: WritingType = WritingType.POEM
    status: ContentStatus = ContentStatus.DRAFT
    year: str | None = Field(default=None, max_length=16)
    category_id: int | None = None


class WritingItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    slug: str
    title: str
    type: WritingType
    status: ContentStatus
    content: str
    excerpt: str | None = None
    year: str | None = None
    views: int
    created_at: datetime


class WritingDetailResponse(BaseModel):
    writing: WritingItem
    comment_count: int
    related: list[WritingItem]
