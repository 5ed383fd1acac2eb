"""User submissions, the author's own posts and the public blog listing."""

from fastapi import APIRouter, Query, status

from poetsite.api.deps import CurrentUser, DbSession
from poetsite.models.base import ContentStatus
from poetsite.schemas.submissions import (
    BlogPostListResponse,
    PublicBlogListResponse,
    SubmissionRequest,
    SubmissionResponse,
)
from poetsite.services.submissions import list_own_posts, list_published_posts, submit

router = APIRouter()
blog_router = APIRouter()


@router.post("", response_model=SubmissionResponse, status_code=status.HTTP_201_CREATED)
def create_submission(
    body: SubmissionRequest, current_user: CurrentUser, db: DbSession
) -> SubmissionResponse:
    """Non-administrative authors always land in PENDING."""
    return submit(db, current_user, body)


@blog_router.get("/mine", response_model=BlogPostListResponse)
def my_posts(
    current_user: CurrentUser,
    db: DbSession,
    status_filter: ContentStatus | None = Query(default=None, alias="status"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
) -> BlogPostListResponse:
    return list_own_posts(db, current_user, status_filter, page, limit)


@blog_router.get("", response_model=PublicBlogListResponse)
def published_posts(
    db: DbSession,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
) -> PublicBlogListResponse:
    """Anonymous access; only PUBLISHED posts are listed."""
    return list_published_posts(db, page, limit)
