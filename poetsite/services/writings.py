"""The poet's writings: admin creation with unique slugs, public lookup by slug."""

import logging

from sqlalchemy.orm import Session

from poetsite.core.database import commit_or_conflict
from poetsite.core.errors import Conflict, NotFound
from poetsite.models import Comment, ContentStatus, Writing
from poetsite.schemas.auth import SessionUser
from poetsite.schemas.writings import WritingCreate, WritingDetailResponse, WritingItem
from poetsite.services.slug import generate_slug, unique_slug

logger = logging.getLogger(__name__)

RELATED_LIMIT = 2


def create_writing(db: Session, author: SessionUser, body: WritingCreate) -> Writing:
    """
    Insert a writing. A client slug must be free; a derived one gets the next free suffix.
    """
    prefix = body.type.value.lower()
    if body.slug:
        slug = generate_slug(body.slug, prefix=prefix)
        if db.query(Writing.id).filter(Writing.slug == slug).first() is not None:
            raise Conflict("এই স্লাগ দিয়ে আরেকটি রচনা আছে")
    else:
        base = generate_slug(body.title, prefix=prefix)
        slug = unique_slug(db, Writing, base)

    writing = Writing(
        title=body.title.strip(),
        slug=slug,
        content=body.content,
        excerpt=body.excerpt or None,
        type=body.type.value,
        status=body.status.value,
        year=body.year or None,
        category_id=body.category_id,
        author_id=author.id,
        views=0,
    )
    db.add(writing)
    commit_or_conflict(db, "এই স্লাগ দিয়ে আরেকটি রচনা আছে")
    db.refresh(writing)
    logger.info("Writing %s (%s) created by account %s", writing.id, slug, author.id)
    return writing


def get_writing_by_slug(db: Session, slug: str) -> WritingDetailResponse:
    """Fetch a writing, count a view, and pick related published writings of the same type."""
    writing = db.query(Writing).filter(Writing.slug == slug).first()
    if writing is None:
        raise NotFound("লেখাটি পাওয়া যায়নি")

    writing.views = (writing.views or 0) + 1
    db.commit()
    db.refresh(writing)

    comment_count = db.query(Comment).filter(Comment.writing_id == writing.id).count()
    related = (
        db.query(Writing)
        .filter(
            Writing.type == writing.type,
            Writing.status == ContentStatus.PUBLISHED.value,
            Writing.id != writing.id,
        )
        .order_by(Writing.views.desc())
        .limit(RELATED_LIMIT)
        .all()
    )
    return WritingDetailResponse(
        writing=WritingItem.model_validate(writing),
        comment_count=comment_count,
        related=[WritingItem.model_validate(w) for w in related],
    )
