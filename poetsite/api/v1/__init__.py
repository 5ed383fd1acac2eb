"""API v1 routes."""

from fastapi import APIRouter

from poetsite.api.v1 import admin, auth, comments, health, newsletter, profile, submissions, writings

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(profile.router, prefix="/profile", tags=["profile"])
router.include_router(comments.router, prefix="/comments", tags=["comments"])
router.include_router(submissions.router, prefix="/submissions", tags=["submissions"])
router.include_router(submissions.blog_router, prefix="/blog", tags=["blog"])
router.include_router(writings.router, prefix="/writings", tags=["writings"])
router.include_router(newsletter.router, prefix="/subscribe", tags=["newsletter"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
