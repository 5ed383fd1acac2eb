"""Gated pages: sign-in, registration and the back-office home."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from poetsite.api.deps import DbSession, require_admin_page
from poetsite.core.roles import role_label
from poetsite.schemas.auth import SessionUser
from poetsite.services.dashboard import dashboard_stats

router = APIRouter()

_LOGIN_PAGE = """<!doctype html>
<html lang="bn"><head><meta charset="utf-8"><title>লগইন</title></head>
<body><h1>লগইন</h1><p>POST /api/v1/auth/login</p></body></html>"""

_REGISTER_PAGE = """<!doctype html>
<html lang="bn"><head><meta charset="utf-8"><title>রেজিস্ট্রেশন</title></head>
<body><h1>রেজিস্ট্রেশন</h1><p>POST /api/v1/auth/register</p></body></html>"""


@router.get("/login", response_class=HTMLResponse)
def login_page() -> str:
    return _LOGIN_PAGE


@router.get("/register", response_class=HTMLResponse)
def register_page() -> str:
    return _REGISTER_PAGE


@router.get("/admin")
def admin_home(
    admin: Annotated[SessionUser, Depends(require_admin_page)],
    db: DbSession,
) -> dict:
    """Back-office home: who is signed in and the content counts."""
    return {
        "user": admin.model_dump(mode="json"),
        "role_label": role_label(admin.role),
        "stats": dashboard_stats(db).model_dump(),
    }
