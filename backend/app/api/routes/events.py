"""Events — read endpoints for event detail pages and the landing page.

Invariants:
    - Slug lookups are trimmed + lowercased before querying (EventService.get_by_slug)
    - Empty slug → 400, unknown slug → 404, store unreachable → 503 (global handlers)
    - /featured is served from fixtures and never acquires a DB connection

Design Decisions:
    - Repository and service built per request via Depends: tests override
      get_event_repository with an in-memory fake
    - /featured registered before /{slug} so it is not captured as a slug
"""

import logging

from fastapi import APIRouter, Depends
from pymongo.asynchronous.database import AsyncDatabase

from app.config import get_settings
from app.core.featured_events import FEATURED_EVENTS
from app.core.repository_protocols import EventRepository
from app.db.event_store import MongoEventRepository
from app.infrastructure.database import get_db
from app.schemas.event import EventEnvelope, EventResponse, FeaturedEvent
from app.services.event_service import EventService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/events", tags=["events"])


def get_event_repository(db: AsyncDatabase = Depends(get_db)) -> EventRepository:
    return MongoEventRepository(db)


def get_event_service(
    events: EventRepository = Depends(get_event_repository),
) -> EventService:
    return EventService(events, get_settings().slug_conflict_retries)


@router.get("/featured", response_model=list[FeaturedEvent])
async def list_featured_events():
    """Static featured events for the landing page."""
    return [FeaturedEvent(**e) for e in FEATURED_EVENTS]


@router.get("/{slug}", response_model=EventEnvelope)
async def get_event_by_slug(
    slug: str, service: EventService = Depends(get_event_service),
):
    """Fetch one event by slug."""
    event = await service.get_by_slug(slug)
    logger.info(f"Event fetched: {event.slug}", extra={"slug": event.slug})
    return EventEnvelope(
        message="Event fetched successfully",
        event=EventResponse.from_event(event),
    )
