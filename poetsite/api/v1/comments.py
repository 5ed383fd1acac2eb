"""Comments on writings and blog posts."""

from fastapi import APIRouter, Query, status

from poetsite.api.deps import CurrentUser, DbSession
from poetsite.schemas.auth import MessageResponse
from poetsite.schemas.comments import (
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    CommentUpdate,
)
from poetsite.services.comments import (
    create_comment,
    delete_comment,
    list_comments,
    to_item,
    update_comment,
)

router = APIRouter()


@router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
def create(body: CommentCreate, current_user: CurrentUser, db: DbSession) -> CommentResponse:
    comment = create_comment(db, current_user, body)
    return CommentResponse(message="মন্তব্য সফলভাবে যোগ করা হয়েছে", comment=to_item(comment))


@router.get("", response_model=CommentListResponse)
def list_(
    db: DbSession,
    writing_id: int | None = Query(default=None),
    blog_post_id: int | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
) -> CommentListResponse:
    """Public listing, newest first."""
    return list_comments(db, writing_id, blog_post_id, page, limit)


@router.patch("/{comment_id}", response_model=CommentResponse)
def update(
    comment_id: int, body: CommentUpdate, current_user: CurrentUser, db: DbSession
) -> CommentResponse:
    comment = update_comment(db, current_user, comment_id, body.content)
    return CommentResponse(message="মন্তব্য আপডেট হয়েছে", comment=to_item(comment))


@router.delete("/{comment_id}", response_model=MessageResponse)
def delete(comment_id: int, current_user: CurrentUser, db: DbSession) -> MessageResponse:
    delete_comment(db, current_user, comment_id)
    return MessageResponse(message="মন্তব্য মুছে ফেলা হয়েছে")
