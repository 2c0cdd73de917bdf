"""Event Schemas — public response shapes for the events API.

Invariants:
    - EventResponse mirrors the stored document, including _id, createdAt, updatedAt
    - Responses are serialized by alias (FastAPI default for response_model)

Design Decisions:
    - Separate from models/event.py: storage validation and the public contract evolve independently
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.event import Event


class EventResponse(BaseModel):
    """Full event record as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(serialization_alias="_id")
    title: str
    slug: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: str
    audience: str
    agenda: list[str]
    organizer: str
    tags: list[str]
    created_at: datetime | None = Field(None, serialization_alias="createdAt")
    updated_at: datetime | None = Field(None, serialization_alias="updatedAt")

    @classmethod
    def from_event(cls, event: Event) -> "EventResponse":
        data = event.model_dump(exclude={"mode"})
        return cls(mode=event.mode.value, **data)


class EventEnvelope(BaseModel):
    """GET /events/{slug} success body."""
    message: str
    event: EventResponse


class FeaturedEvent(BaseModel):
    """Landing-page card for a featured event."""
    image: str
    title: str
    slug: str
    location: str
    date: str
    time: str
