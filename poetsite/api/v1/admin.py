"""Back-office API: user management, admin-authored content, moderation."""

from enum import Enum

from fastapi import APIRouter, status
from sqlalchemy.orm import Session

from poetsite.api.deps import AdminUser, DbSession, ModeratorUser
from poetsite.models.base import ContentStatus
from poetsite.schemas.submissions import BlogSubmission, ModerationResponse, SubmissionResponse
from poetsite.schemas.users import (
    DashboardStats,
    RoleChangeRequest,
    RoleChangeResponse,
    UserListItem,
    UsersListResponse,
)
from poetsite.schemas.writings import WritingCreate, WritingItem
from poetsite.services.accounts import change_role, list_users
from poetsite.services.dashboard import dashboard_stats
from poetsite.services.submissions import CREATED_MESSAGE, create_blog_post, set_status
from poetsite.services.writings import create_writing

router = APIRouter()


class ModeratedKind(str, Enum):
    BLOG = "blog"
    TRIBUTE = "tribute"
    GALLERY = "gallery"
    AUDIO = "audio"
    VIDEO = "video"


@router.get("/stats", response_model=DashboardStats)
def stats(_admin: AdminUser, db: DbSession) -> DashboardStats:
    return dashboard_stats(db)


@router.get("/users", response_model=UsersListResponse)
def users(_admin: AdminUser, db: DbSession) -> UsersListResponse:
    """List all accounts, deleted ones included."""
    return UsersListResponse(users=[UserListItem.model_validate(u) for u in list_users(db)])


@router.put("/users/role", response_model=RoleChangeResponse)
def update_role(body: RoleChangeRequest, actor: ModeratorUser, db: DbSession) -> RoleChangeResponse:
    user = change_role(db, actor, body.user_id, body.new_role)
    return RoleChangeResponse(message="রোল পরিবর্তন হয়েছে", user=UserListItem.model_validate(user))


@router.post("/blog", response_model=SubmissionResponse, status_code=status.HTTP_201_CREATED)
def create_blog(body: BlogSubmission, author: AdminUser, db: DbSession) -> SubmissionResponse:
    post = create_blog_post(db, author, body)
    return SubmissionResponse(
        kind="blog",
        id=post.id,
        status=ContentStatus(post.status),
        slug=post.slug,
        message=CREATED_MESSAGE,
    )


@router.post("/writings", response_model=WritingItem, status_code=status.HTTP_201_CREATED)
def create_writing_endpoint(body: WritingCreate, author: AdminUser, db: DbSession) -> WritingItem:
    return WritingItem.model_validate(create_writing(db, author, body))


def _moderate(
    db: Session, kind: ModeratedKind, record_id: int, new_status: ContentStatus, message: str
) -> ModerationResponse:
    record = set_status(db, kind.value, record_id, new_status)
    return ModerationResponse(kind=kind.value, id=record.id, status=ContentStatus(record.status), message=message)


@router.post("/{kind}/{record_id}/approve", response_model=ModerationResponse)
def approve(kind: ModeratedKind, record_id: int, _mod: ModeratorUser, db: DbSession) -> ModerationResponse:
    return _moderate(db, kind, record_id, ContentStatus.PUBLISHED, "অনুমোদিত হয়েছে")


@router.post("/{kind}/{record_id}/reject", response_model=ModerationResponse)
def reject(kind: ModeratedKind, record_id: int, _mod: ModeratorUser, db: DbSession) -> ModerationResponse:
    return _moderate(db, kind, record_id, ContentStatus.ARCHIVED, "প্রত্যাখ্যাত হয়েছে")
