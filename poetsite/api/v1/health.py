"""Health check endpoint with database connectivity check."""

from fastapi import APIRouter

from poetsite.api.deps import DbSession
from poetsite.core.config import settings
from poetsite.core.database import check_db_connected
from poetsite.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(db: DbSession) -> HealthResponse:
    """Used by load balancers and monitoring."""
    db_status = "connected" if check_db_connected(db) else "disconnected"
    return HealthResponse(status="ok", environment=settings.APP_ENV, database=db_status)
