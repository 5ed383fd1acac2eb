"""Pydantic request/response schemas."""

from poetsite.schemas.auth import (
    AuthenticatedUser,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    SessionResponse,
    SessionUser,
)
from poetsite.schemas.comments import (
    CommentCreate,
    CommentItem,
    CommentListResponse,
    CommentUpdate,
)
from poetsite.schemas.health import HealthResponse
from poetsite.schemas.profile import PasswordChange, ProfileUpdate
from poetsite.schemas.newsletter import SubscribeRequest
from poetsite.schemas.submissions import (
    AudioSubmission,
    BlogSubmission,
    GallerySubmission,
    SubmissionRequest,
    SubmissionResponse,
    TributeSubmission,
    VideoSubmission,
)
from poetsite.schemas.users import DashboardStats, RoleChangeRequest, UserListItem
from poetsite.schemas.writings import WritingCreate, WritingDetailResponse, WritingItem

__all__ = [
    "AudioSubmission",
    "AuthenticatedUser",
    "BlogSubmission",
    "CommentCreate",
    "CommentItem",
    "CommentListResponse",
    "CommentUpdate",
    "DashboardStats",
    "GallerySubmission",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "PasswordChange",
    "ProfileUpdate",
    "RegisterRequest",
    "RoleChangeRequest",
    "SessionResponse",
    "SessionUser",
    "SubmissionRequest",
    "SubmissionResponse",
    "SubscribeRequest",
    "TributeSubmission",
    "UserListItem",
    "VideoSubmission",
    "WritingCreate",
    "WritingDetailResponse",
    "WritingItem",
]
