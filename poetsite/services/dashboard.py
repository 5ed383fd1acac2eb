"""Back-office home counts."""

from sqlalchemy.orm import Session

from poetsite.models import (
    Audio,
    BlogPost,
    ContentStatus,
    GalleryImage,
    Tribute,
    User,
    Video,
    Writing,
    WritingType,
)
from poetsite.schemas.users import DashboardStats

_PUBLISHED = ContentStatus.PUBLISHED.value
_PENDING = ContentStatus.PENDING.value


def _published_writings(db: Session, kind: WritingType) -> int:
    return (
        db.query(Writing)
        .filter(Writing.type == kind.value, Writing.status == _PUBLISHED)
        .count()
    )


def dashboard_stats(db: Session) -> DashboardStats:
    return DashboardStats(
        poems=_published_writings(db, WritingType.POEM),
        songs=_published_writings(db, WritingType.SONG),
        essays=_published_writings(db, WritingType.ESSAY),
        published_blog_posts=db.query(BlogPost).filter(BlogPost.status == _PUBLISHED).count(),
        pending_blog_posts=db.query(BlogPost).filter(BlogPost.status == _PENDING).count(),
        pending_tributes=db.query(Tribute).filter(Tribute.status == _PENDING).count(),
        pending_gallery_images=db.query(GalleryImage).filter(GalleryImage.status == _PENDING).count(),
        pending_audios=db.query(Audio).filter(Audio.status == _PENDING).count(),
        pending_videos=db.query(Video).filter(Video.status == _PENDING).count(),
        users=db.query(User).filter(User.is_deleted.is_(False)).count(),
    )
