"""Public lookup of the poet's writings."""

from fastapi import APIRouter

from poetsite.api.deps import DbSession
from poetsite.schemas.writings import WritingDetailResponse
from poetsite.services.writings import get_writing_by_slug

router = APIRouter()


@router.get("/{slug}", response_model=WritingDetailResponse)
def get_writing(slug: str, db: DbSession) -> WritingDetailResponse:
    """Counts a view on every hit."""
    return get_writing_by_slug(db, slug)
