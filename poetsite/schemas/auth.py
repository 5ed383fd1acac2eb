"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from poetsite.core.roles import Role

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class LoginRequest(BaseModel):
    """Credentials for sign-in. Emptiness is checked by the credential verifier."""

    model_config = ConfigDict(extra="forbid")

    email: str | None = Field(default=None, max_length=255, description="Account email")
    password: str | None = Field(default=None, max_length=128, description="Password")


class RegisterRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(..., max_length=128)
    phone: str | None = Field(default=None, max_length=32, description="Accepted but not stored")


class AuthenticatedUser(BaseModel):
    """Identity returned by a successful credential check."""

    id: int
    email: str
    name: str | None = None
    image: str | None = None
    role: Role


class SessionUser(BaseModel):
    """Session claim exposed to handlers: refreshed from the store on every read."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    role: Role
    name: str | None = None
    email: str
    image: str | None = None


class SessionResponse(BaseModel):
    """Response for login and GET /auth/me."""

    user: SessionUser
    role_label: str
    is_admin: bool
    message: str | None = None


class MessageResponse(BaseModel):
    message: str
