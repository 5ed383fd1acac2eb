"""Schemas for profile self-service."""

from pydantic import BaseModel, ConfigDict, Field


class NotificationPreferences(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email_notifications: bool | None = None
    new_comments: bool | None = None
    submission_status: bool | None = None
    newsletter: bool | None = None


class ProfileUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=255)
    bio: str | None = Field(default=None, max_length=5000)
    image: str | None = Field(default=None, max_length=2048)
    username: str | None = Field(default=None, max_length=64)
    notifications: NotificationPreferences | None = None


class PasswordChange(BaseModel):
    model_config = ConfigDict(extra="forbid")

    current_password: str | None = Field(default=None, max_length=128)
    new_password: str | None = Field(default=None, max_length=128)


class ProfileOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None = None
    username: str | None = None
    email: str
    bio: str | None = None
    image: str | None = None


class ProfileResponse(BaseModel):
    message: str
    user: ProfileOut
