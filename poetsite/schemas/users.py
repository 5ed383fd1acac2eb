"""Schemas for back-office user management."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from poetsite.core.roles import Role


class RoleChangeRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    user_id: int
    new_role: Role


class UserListItem(BaseModel):
    """User entry for admin list (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str | None = None
    username: str | None = None
    role: Role
    is_deleted: bool
    created_at: datetime


class UsersListResponse(BaseModel):
    users: list[UserListItem]


class RoleChangeResponse(BaseModel):
    message: str
    user: UserListItem


class DashboardStats(BaseModel):
    """Counts shown on the back-office home."""

    poems: int
    songs: int
    essays: int
    published_blog_posts: int
    pending_blog_posts: int
    pending_tributes: int
    pending_gallery_images: int
    pending_audios: int
    pending_videos: int
    users: int
