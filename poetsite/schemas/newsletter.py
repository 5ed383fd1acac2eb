"""Newsletter subscription request."""

from pydantic import BaseModel, ConfigDict, Field


class SubscribeRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Validated by services.newsletter.subscribe: blank or without "@" is a 400.
    email: str | None = Field(default=None, max_length=255)
