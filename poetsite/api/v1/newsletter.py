"""Public newsletter subscription."""

from fastapi import APIRouter

from poetsite.api.deps import DbSession
from poetsite.schemas.auth import MessageResponse
from poetsite.schemas.newsletter import SubscribeRequest
from poetsite.services.newsletter import subscribe

router = APIRouter()


@router.post("", response_model=MessageResponse)
def subscribe_endpoint(body: SubscribeRequest, db: DbSession) -> MessageResponse:
    return MessageResponse(message=subscribe(db, body.email))
