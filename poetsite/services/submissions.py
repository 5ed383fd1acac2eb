"""
Creation and moderation of user-generated content (blog posts, tributes, gallery images,
audio and video), plus the public listing of published blog posts.

Non-administrative authors always create PENDING records, whatever status the
request carries. Administrative authors may set the status directly.
"""

import logging
import math
import re
from datetime import UTC, datetime

from sqlalchemy.orm import Session

from poetsite.core.database import commit_or_conflict
from poetsite.core.errors import NotFound, ValidationFailed
from poetsite.core.roles import is_administrative
from poetsite.models import Audio, BlogPost, Category, ContentStatus, GalleryImage, Tribute, Video
from poetsite.schemas.auth import SessionUser
from poetsite.schemas.submissions import (
    AudioSubmission,
    BlogPostItem,
    BlogPostListResponse,
    BlogSubmission,
    GallerySubmission,
    PublicAuthor,
    PublicBlogListResponse,
    PublicBlogPost,
    SubmissionResponse,
    TributeSubmission,
    VideoSubmission,
)
from poetsite.services.slug import generate_slug, transliterate_slug, unique_slug

logger = logging.getLogger(__name__)

MIN_TITLE_LENGTH = 5
MIN_BLOG_CONTENT_LENGTH = 50
MIN_TRIBUTE_LENGTH = 10
EXCERPT_LENGTH = 200

YOUTUBE_ID_PATTERN = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([^&\s]+)")

PENDING_MESSAGE = "আপনার লেখা সফলভাবে জমা হয়েছে! অ্যাডমিন রিভিউয়ের পর প্রকাশিত হবে।"
CREATED_MESSAGE = "সফলভাবে তৈরি হয়েছে"
DEFAULT_CATEGORY_NAME = "সাধারণ"

MODERATED_MODELS: dict[str, type] = {
    "blog": BlogPost,
    "tribute": Tribute,
    "gallery": GalleryImage,
    "audio": Audio,
    "video": Video,
}


def effective_status(author: SessionUser, requested: ContentStatus | None) -> ContentStatus:
    """Status a new record gets: PENDING unless an administrator asked for something else."""
    if is_administrative(author.role) and requested is not None:
        return requested
    return ContentStatus.PENDING


def _excerpt(content: str) -> str:
    if len(content) <= EXCERPT_LENGTH:
        return content
    return content[:EXCERPT_LENGTH] + "..."


def _find_or_create_category(db: Session, name: str) -> Category:
    """Reuse a category only by exact name; a new one gets a unique Latin slug."""
    category = db.query(Category).filter(Category.name == name).first()
    if category is None:
        slug = unique_slug(db, Category, transliterate_slug(name, prefix="category"))
        category = Category(name=name, slug=slug, type="BLOG")
        db.add(category)
        db.flush()
    return category


def create_blog_post(db: Session, author: SessionUser, body: BlogSubmission) -> BlogPost:
    title = body.title.strip()
    content = body.content.strip()
    if not title or not content:
        raise ValidationFailed("শিরোনাম এবং বিষয়বস্তু প্রয়োজন")
    if len(title) < MIN_TITLE_LENGTH:
        raise ValidationFailed("শিরোনাম কমপক্ষে ৫ অক্ষরের হতে হবে")
    if len(content) < MIN_BLOG_CONTENT_LENGTH:
        raise ValidationFailed("বিষয়বস্তু কমপক্ষে ৫০ অক্ষরের হতে হবে")

    base = generate_slug(body.slug or title, prefix="post")
    slug = unique_slug(db, BlogPost, base)

    category_id = None
    if body.category_name and body.category_name.strip():
        category_id = _find_or_create_category(db, body.category_name.strip()).id

    status = effective_status(author, body.status)
    post = BlogPost(
        title=title,
        slug=slug,
        content=content,
        excerpt=body.excerpt or _excerpt(content),
        cover_image=body.cover_image,
        status=status.value,
        published_at=datetime.now(UTC) if status == ContentStatus.PUBLISHED else None,
        author_id=author.id,
        category_id=category_id,
        views=0,
    )
    db.add(post)
    commit_or_conflict(db, "এই স্লাগ দিয়ে আরেকটি ব্লগ আছে")
    db.refresh(post)
    logger.info("Blog post %s (%s) created by account %s as %s", post.id, slug, author.id, status.value)
    return post


def create_tribute(db: Session, author: SessionUser, body: TributeSubmission) -> Tribute:
    content = body.content.strip()
    if len(content) < MIN_TRIBUTE_LENGTH:
        raise ValidationFailed("শ্রদ্ধাঞ্জলি অন্তত ১০ অক্ষরের হতে হবে")
    tribute = Tribute(
        content=content,
        district=body.district or None,
        status=effective_status(author, body.status).value,
        author_id=author.id,
    )
    db.add(tribute)
    db.commit()
    db.refresh(tribute)
    return tribute


def create_gallery_image(db: Session, author: SessionUser, body: GallerySubmission) -> GalleryImage:
    if not body.url.strip():
        raise ValidationFailed("ছবির URL প্রয়োজন")
    image = GalleryImage(
        url=body.url.strip(),
        title=body.title or None,
        description=body.description or None,
        year=body.year or None,
        location=body.location or None,
        status=effective_status(author, body.status).value,
        submitted_by=author.id,
    )
    db.add(image)
    db.commit()
    db.refresh(image)
    return image


def _youtube_id(url: str) -> str:
    match = YOUTUBE_ID_PATTERN.search(url)
    return match.group(1) if match else url


def create_audio(db: Session, author: SessionUser, body: AudioSubmission) -> Audio:
    title = body.title.strip()
    if not title or not body.audio_url.strip():
        raise ValidationFailed("শিরোনাম এবং অডিও URL প্রয়োজন")
    audio = Audio(
        title=title,
        slug=unique_slug(db, Audio, generate_slug(title, prefix="audio")),
        audio_url=body.audio_url.strip(),
        artist=body.artist or None,
        album=body.album or None,
        duration=body.duration or None,
        cover_image=body.cover_image or None,
        lyrics=body.lyrics or None,
        status=effective_status(author, body.status).value,
        submitted_by=author.id,
    )
    db.add(audio)
    commit_or_conflict(db, "এই স্লাগ দিয়ে আরেকটি অডিও আছে")
    db.refresh(audio)
    logger.info("Audio %s (%s) submitted by account %s", audio.id, audio.slug, author.id)
    return audio


def create_video(db: Session, author: SessionUser, body: VideoSubmission) -> Video:
    title = body.title.strip()
    if not title or not body.youtube_url.strip():
        raise ValidationFailed("শিরোনাম এবং YouTube URL প্রয়োজন")
    youtube_id = _youtube_id(body.youtube_url.strip())
    video = Video(
        title=title,
        slug=unique_slug(db, Video, generate_slug(title, prefix="video")),
        youtube_id=youtube_id,
        description=body.description or None,
        duration=body.duration or None,
        category=body.category or None,
        thumbnail=f"https://img.youtube.com/vi/{youtube_id}/maxresdefault.jpg",
        status=effective_status(author, body.status).value,
        submitted_by=author.id,
    )
    db.add(video)
    commit_or_conflict(db, "এই স্লাগ দিয়ে আরেকটি ভিডিও আছে")
    db.refresh(video)
    logger.info("Video %s (%s) submitted by account %s", video.id, video.slug, author.id)
    return video


def submit(
    db: Session,
    author: SessionUser,
    body: BlogSubmission | TributeSubmission | GallerySubmission | AudioSubmission | VideoSubmission,
) -> SubmissionResponse:
    """Dispatch on the submission kind."""
    if isinstance(body, BlogSubmission):
        post = create_blog_post(db, author, body)
        record, slug = post, post.slug
    elif isinstance(body, TributeSubmission):
        record, slug = create_tribute(db, author, body), None
    elif isinstance(body, GallerySubmission):
        record, slug = create_gallery_image(db, author, body), None
    elif isinstance(body, AudioSubmission):
        record = create_audio(db, author, body)
        slug = record.slug
    else:
        record = create_video(db, author, body)
        slug = record.slug

    status = ContentStatus(record.status)
    return SubmissionResponse(
        kind=body.kind,
        id=record.id,
        status=status,
        slug=slug,
        message=PENDING_MESSAGE if status == ContentStatus.PENDING else CREATED_MESSAGE,
    )


def set_status(db: Session, kind: str, record_id: int, status: ContentStatus):
    """Approve (PUBLISHED) or reject (ARCHIVED) a submission."""
    model = MODERATED_MODELS[kind]
    record = db.get(model, record_id)
    if record is None:
        raise NotFound()
    record.status = status.value
    if isinstance(record, BlogPost) and status == ContentStatus.PUBLISHED:
        record.published_at = datetime.now(UTC)
    db.commit()
    db.refresh(record)
    logger.info("%s %s moved to %s", kind, record_id, status.value)
    return record


def list_own_posts(
    db: Session,
    author: SessionUser,
    status: ContentStatus | None = None,
    page: int = 1,
    limit: int = 10,
) -> BlogPostListResponse:
    page = max(page, 1)
    limit = min(max(limit, 1), 100)
    query = db.query(BlogPost).filter(BlogPost.author_id == author.id)
    if status is not None:
        query = query.filter(BlogPost.status == status.value)
    total = query.count()
    rows = (
        query.order_by(BlogPost.created_at.desc(), BlogPost.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return BlogPostListResponse(
        posts=[BlogPostItem.model_validate(p) for p in rows],
        total=total,
        page=page,
        limit=limit,
        total_pages=math.ceil(total / limit),
    )


def list_published_posts(db: Session, page: int = 1, limit: int = 10) -> PublicBlogListResponse:
    """Public blog page: PUBLISHED posts only, newest first."""
    page = max(page, 1)
    limit = min(max(limit, 1), 100)
    query = db.query(BlogPost).filter(BlogPost.status == ContentStatus.PUBLISHED.value)
    total = query.count()
    rows = (
        query.order_by(BlogPost.published_at.desc(), BlogPost.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    posts = [
        PublicBlogPost(
            id=p.id,
            slug=p.slug,
            title=p.title,
            excerpt=p.excerpt,
            cover_image=p.cover_image,
            views=p.views or 0,
            published_at=p.published_at or p.created_at,
            author=PublicAuthor.model_validate(p.author),
            category=p.category.name if p.category is not None else DEFAULT_CATEGORY_NAME,
        )
        for p in rows
    ]
    return PublicBlogListResponse(
        posts=posts,
        total=total,
        page=page,
        limit=limit,
        total_pages=math.ceil(total / limit),
    )
