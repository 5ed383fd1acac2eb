"""Cookie session login/logout, registration and the current-session endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from poetsite.api.deps import (
    CurrentUser,
    DbSession,
    clear_session_cookie,
    get_auth_config,
    set_session_cookie,
)
from poetsite.core.auth_config import AuthConfig
from poetsite.core.roles import is_administrative, role_label
from poetsite.schemas.auth import (
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    SessionResponse,
    SessionUser,
)
from poetsite.services.accounts import register_user
from poetsite.services.credentials import complete_sign_in, verify_credentials
from poetsite.services.session import issue_session

router = APIRouter()


def _session_response(user: SessionUser, message: str | None = None) -> SessionResponse:
    return SessionResponse(
        user=user,
        role_label=role_label(user.role),
        is_admin=is_administrative(user.role),
        message=message,
    )


@router.post("/login", response_model=SessionResponse)
def login(
    body: LoginRequest,
    response: Response,
    db: DbSession,
    config: Annotated[AuthConfig, Depends(get_auth_config)],
) -> SessionResponse:
    """
    Authenticate with email and password; sets the HttpOnly session cookie.

    Unknown email and wrong password return the same 401 message.
    """
    identity = verify_credentials(db, body.email, body.password)
    complete_sign_in(db, identity)
    set_session_cookie(response, issue_session(identity, config), config)
    user = SessionUser(
        id=identity.id,
        role=identity.role,
        name=identity.name,
        email=identity.email,
        image=identity.image,
    )
    return _session_response(user, message="লগইন সফল হয়েছে")


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    config: Annotated[AuthConfig, Depends(get_auth_config)],
) -> MessageResponse:
    clear_session_cookie(response, config)
    return MessageResponse(message="লগআউট সফল হয়েছে")


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, db: DbSession) -> MessageResponse:
    register_user(db, body)
    return MessageResponse(message="রেজিস্ট্রেশন সফল হয়েছে")


@router.get("/me", response_model=SessionResponse)
def me(current_user: CurrentUser) -> SessionResponse:
    """The session user as currently stored (role changes show up here immediately)."""
    return _session_response(current_user)
