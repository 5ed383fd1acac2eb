"""Comments on writings and blog posts, with author-only edit/delete."""

import logging
import math
from datetime import UTC, datetime

from sqlalchemy.orm import Session

from poetsite.core.errors import Forbidden, NotFound, ValidationFailed
from poetsite.models import BlogPost, Comment, Writing
from poetsite.schemas.auth import SessionUser
from poetsite.schemas.comments import (
    CommentAuthor,
    CommentCreate,
    CommentItem,
    CommentListResponse,
    Pagination,
)
from poetsite.services.content_filter import contains_contact_info

logger = logging.getLogger(__name__)

MIN_COMMENT_LENGTH = 3
MAX_PAGE_SIZE = 100

_BENGALI_DIGITS = str.maketrans("0123456789", "০১২৩৪৫৬৭৮৯")
_BENGALI_MONTHS = (
    "জানুয়ারি", "ফেব্রুয়ারি", "মার্চ", "এপ্রিল", "মে", "জুন",
    "জুলাই", "আগস্ট", "সেপ্টেম্বর", "অক্টোবর", "নভেম্বর", "ডিসেম্বর",
)


def _bn(number: int) -> str:
    return str(number).translate(_BENGALI_DIGITS)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    return value if value.tzinfo else value.replace(tzinfo=UTC)


def relative_time(created_at: datetime, now: datetime | None = None) -> str:
    """Bengali "time ago" label; older than a month falls back to a calendar date."""
    created_at = _as_utc(created_at)
    now = now or datetime.now(UTC)
    minutes = int((now - created_at).total_seconds() // 60)
    hours = minutes // 60
    days = hours // 24
    if minutes < 1:
        return "এইমাত্র"
    if minutes < 60:
        return f"{_bn(minutes)} মিনিট আগে"
    if hours < 24:
        return f"{_bn(hours)} ঘণ্টা আগে"
    if days < 7:
        return f"{_bn(days)} দিন আগে"
    if days < 30:
        return f"{_bn(days // 7)} সপ্তাহ আগে"
    return f"{_bn(created_at.day)} {_BENGALI_MONTHS[created_at.month - 1]} {_bn(created_at.year)}"


def _validate_content(content: str) -> str:
    text = content.strip()
    if len(text) < MIN_COMMENT_LENGTH:
        raise ValidationFailed("মন্তব্য কমপক্ষে ৩ অক্ষরের হতে হবে")
    if contains_contact_info(text):
        raise ValidationFailed("মন্তব্যে কোনো লিংক বা URL দেওয়া যাবে না")
    return text


def to_item(comment: Comment) -> CommentItem:
    return CommentItem(
        id=comment.id,
        content=comment.content,
        created_at=comment.created_at,
        time_ago=relative_time(comment.created_at),
        user=CommentAuthor.model_validate(comment.user),
    )


def create_comment(db: Session, user: SessionUser, body: CommentCreate) -> Comment:
    """Validate, check the parent exists, then insert."""
    content = _validate_content(body.content)

    if body.writing_id is not None:
        if db.get(Writing, body.writing_id) is None:
            raise NotFound("লেখাটি পাওয়া যায়নি")
    elif db.get(BlogPost, body.blog_post_id) is None:
        raise NotFound("ব্লগ পোস্টটি পাওয়া যায়নি")

    comment = Comment(
        content=content,
        user_id=user.id,
        writing_id=body.writing_id,
        blog_post_id=body.blog_post_id,
    )
    db.add(comment)
    db.commit()
    db.refresh(comment)
    logger.info("Comment %s created by account %s", comment.id, user.id)
    return comment


def list_comments(
    db: Session,
    writing_id: int | None,
    blog_post_id: int | None,
    page: int = 1,
    limit: int = 20,
) -> CommentListResponse:
    """Newest first, paginated. Exactly one parent id must be given."""
    if (writing_id is None) == (blog_post_id is None):
        raise ValidationFailed("writing_id বা blog_post_id প্রয়োজন")
    page = max(page, 1)
    limit = min(max(limit, 1), MAX_PAGE_SIZE)

    query = db.query(Comment)
    if writing_id is not None:
        query = query.filter(Comment.writing_id == writing_id)
    else:
        query = query.filter(Comment.blog_post_id == blog_post_id)

    total = query.count()
    rows = (
        query.order_by(Comment.created_at.desc(), Comment.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return CommentListResponse(
        comments=[to_item(c) for c in rows],
        pagination=Pagination(
            total=total,
            page=page,
            limit=limit,
            total_pages=math.ceil(total / limit),
        ),
    )


def _owned_comment(db: Session, user: SessionUser, comment_id: int) -> Comment:
    comment = db.get(Comment, comment_id)
    if comment is None:
        raise NotFound("মন্তব্য পাওয়া যায়নি")
    if comment.user_id != user.id:
        raise Forbidden("আপনি শুধু নিজের মন্তব্য পরিবর্তন বা মুছতে পারবেন")
    return comment


def update_comment(db: Session, user: SessionUser, comment_id: int, content: str) -> Comment:
    comment = _owned_comment(db, user, comment_id)
    comment.content = _validate_content(content)
    db.commit()
    db.refresh(comment)
    return comment


def delete_comment(db: Session, user: SessionUser, comment_id: int) -> None:
    """Only the author may delete; a mismatch leaves the row untouched."""
    comment = _owned_comment(db, user, comment_id)
    db.delete(comment)
    db.commit()
    logger.info("Comment %s deleted by account %s", comment_id, user.id)
