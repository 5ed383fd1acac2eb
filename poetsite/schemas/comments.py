"""Request/response schemas for comments."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CommentCreate(BaseModel):
    """New comment; exactly one of writing_id / blog_post_id must be set."""

    model_config = ConfigDict(extra="forbid")

    content: str = Field(..., max_length=5000)
    writing_id: int | None = None
    blog_post_id: int | None = None

    @model_validator(mode="after")
    def check_single_parent(self) -> "CommentCreate":
        if (self.writing_id is None) == (self.blog_post_id is None):
            raise ValueError("Exactly one of writing_id or blog_post_id is required")
        return self


class CommentUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    content: str = Field(..., max_length=5000)


class CommentAuthor(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None = None
    image: str | None = None


class CommentItem(BaseModel):
    id: int
    content: str
    created_at: datetime
    time_ago: str | None = None
    user: CommentAuthor


class Pagination(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int


class CommentListResponse(BaseModel):
    comments: list[CommentItem]
    pagination: Pagination


class CommentResponse(BaseModel):
    message: str
    comment: CommentItem
