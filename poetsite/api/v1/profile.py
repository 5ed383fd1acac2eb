"""Profile self-service: update, password change, account deletion."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from poetsite.api.deps import CurrentUser, DbSession, clear_session_cookie, get_auth_config
from poetsite.core.auth_config import AuthConfig
from poetsite.core.config import settings
from poetsite.schemas.auth import MessageResponse
from poetsite.schemas.profile import PasswordChange, ProfileOut, ProfileResponse, ProfileUpdate
from poetsite.services.accounts import change_password, soft_delete_account, update_profile

router = APIRouter()


@router.put("", response_model=ProfileResponse)
def update(body: ProfileUpdate, current_user: CurrentUser, db: DbSession) -> ProfileResponse:
    user = update_profile(db, current_user, body, settings.USERNAME_CHANGE_COOLDOWN_DAYS)
    return ProfileResponse(message="প্রোফাইল আপডেট হয়েছে", user=ProfileOut.model_validate(user))


@router.put("/password", response_model=MessageResponse)
def update_password(body: PasswordChange, current_user: CurrentUser, db: DbSession) -> MessageResponse:
    change_password(db, current_user, body)
    return MessageResponse(message="পাসওয়ার্ড পরিবর্তন হয়েছে")


@router.delete("", response_model=MessageResponse)
def delete_account(
    response: Response,
    current_user: CurrentUser,
    db: DbSession,
    config: Annotated[AuthConfig, Depends(get_auth_config)],
) -> MessageResponse:
    """Soft-delete the caller's account and end the session."""
    soft_delete_account(db, current_user)
    clear_session_cookie(response, config)
    return MessageResponse(message="অ্যাকাউন্ট মুছে ফেলা হয়েছে")
