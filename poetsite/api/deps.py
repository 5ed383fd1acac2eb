"""Request dependencies: auth config, session resolution and role guards."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from poetsite.core.auth_config import AuthConfig
from poetsite.core.database import get_db
from poetsite.core.errors import Forbidden, Unauthenticated
from poetsite.core.roles import can_moderate, is_administrative
from poetsite.schemas.auth import SessionUser
from poetsite.services.session import (
    claim_is_stale,
    issue_session,
    read_session_claim,
    refresh_session,
)


def get_auth_config(request: Request) -> AuthConfig:
    """The AuthConfig built by create_app."""
    return request.app.state.auth_config


def set_session_cookie(response: Response, token: str, config: AuthConfig) -> None:
    response.set_cookie(
        key=config.cookie_name,
        value=token,
        max_age=config.expire_minutes * 60,
        httponly=True,
        secure=config.cookie_secure,
        samesite="lax",
        path="/",
    )


def clear_session_cookie(response: Response, config: AuthConfig) -> None:
    response.delete_cookie(key=config.cookie_name, path="/", samesite="lax")


def get_optional_session(
    request: Request,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    config: Annotated[AuthConfig, Depends(get_auth_config)],
) -> SessionUser | None:
    """
    Resolve the session cookie into a SessionUser refreshed from the store.

    A claim whose role or name is out of date is re-signed onto the response;
    a claim for a missing or deleted account is cleared.
    """
    claim = read_session_claim(request.cookies.get(config.cookie_name), config)
    if claim is None:
        return None
    current = refresh_session(db, claim)
    if current is None:
        clear_session_cookie(response, config)
        return None
    if claim_is_stale(claim, current):
        set_session_cookie(response, issue_session(current, config), config)
    return current


def get_current_user(
    session: Annotated[SessionUser | None, Depends(get_optional_session)],
) -> SessionUser:
    """Dependency: require a session. Raises Unauthenticated (401) otherwise."""
    if session is None:
        raise Unauthenticated()
    return session


def require_admin(
    current_user: Annotated[SessionUser, Depends(get_current_user)],
) -> SessionUser:
    """Dependency: require an administrative role. Raises Forbidden (403) otherwise."""
    if not is_administrative(current_user.role):
        raise Forbidden()
    return current_user


def require_moderator(
    current_user: Annotated[SessionUser, Depends(get_current_user)],
) -> SessionUser:
    """Dependency: require ADMIN or SUPER_ADMIN."""
    if not can_moderate(current_user.role):
        raise Forbidden()
    return current_user


def require_admin_page(
    session: Annotated[SessionUser | None, Depends(get_optional_session)],
    config: Annotated[AuthConfig, Depends(get_auth_config)],
) -> SessionUser:
    """Back-office pages redirect instead of answering 401/403."""
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_303_SEE_OTHER,
            detail="Not authenticated",
            headers={"Location": config.login_path},
        )
    if not is_administrative(session.role):
        raise HTTPException(
            status_code=status.HTTP_303_SEE_OTHER,
            detail="Admin role required",
            headers={"Location": config.site_home},
        )
    return session


DbSession = Annotated[Session, Depends(get_db)]
CurrentUser = Annotated[SessionUser, Depends(get_current_user)]
AdminUser = Annotated[SessionUser, Depends(require_admin)]
ModeratorUser = Annotated[SessionUser, Depends(require_moderator)]
