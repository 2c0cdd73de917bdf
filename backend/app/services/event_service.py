"""Event Service — two-phase prepare/commit persistence and slug lookup.

Invariants:
    - prepare() order is fixed: slug resolution → date normalization → time normalization
    - Slug re-derived only when the record is new or its title changed
    - date/time re-normalized only when new or changed
    - commit() never resolves slugs or normalizes — it writes what prepare() produced
    - A duplicate-slug rejection from the store triggers re-prepare, bounded by
      slug_conflict_retries; the final rejection propagates

Design Decisions:
    - Explicit prepare/commit over save hooks: the uniqueness probe and the write are
      visibly sequenced and each is testable on its own
    - current (the stored version) passed in by the caller instead of dirty-tracking:
      "changed" means differs from what is stored
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from pydantic import ValidationError

from app.core.errors import (
    DuplicateKeyConflictError, ErrorContext, InputValidationError, ResourceNotFoundError,
)
from app.core.repository_protocols import EventRepository
from app.core.schedule import normalize_date, normalize_time
from app.models.event import Event
from app.services.slug_resolver import resolve_unique_slug

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedEvent:
    """Event whose derived fields are resolved and ready to write."""
    event: Event
    is_new: bool


def validate_event(data: dict) -> Event:
    """Build an Event from raw fields, mapping pydantic errors to InputValidationError."""
    try:
        return Event.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"])
        raise InputValidationError(first["msg"], field) from e


class EventService:
    """Event persistence orchestration over an EventRepository."""

    def __init__(self, events: EventRepository, slug_conflict_retries: int = 3):
        self.events = events
        self.slug_conflict_retries = slug_conflict_retries

    async def prepare(
        self, draft: Event, current: Event | None = None,
    ) -> PreparedEvent:
        is_new = current is None
        updates: dict = {}

        if is_new or draft.title != current.title:
            updates["slug"] = await resolve_unique_slug(
                draft.title, draft.id, self.events,
            )
        elif not draft.slug:
            updates["slug"] = current.slug

        if is_new or draft.date != current.date:
            updates["date"] = normalize_date(draft.date)

        if is_new or draft.time != current.time:
            updates["time"] = normalize_time(draft.time)

        return PreparedEvent(event=draft.model_copy(update=updates), is_new=is_new)

    async def commit(self, prepared: PreparedEvent) -> Event:
        now = datetime.now(timezone.utc)
        if prepared.is_new:
            event = prepared.event.model_copy(
                update={"id": None, "created_at": now, "updated_at": now},
            )
            return await self.events.insert(event)
        event = prepared.event.model_copy(update={"updated_at": now})
        return await self.events.replace(event)

    async def save(self, draft: Event, current: Event | None = None) -> Event:
        """prepare + commit, re-resolving the slug if a concurrent writer took it."""
        attempt = 0
        while True:
            prepared = await self.prepare(draft, current)
            try:
                return await self.commit(prepared)
            except DuplicateKeyConflictError as e:
                if e.key != "slug" or attempt >= self.slug_conflict_retries:
                    raise
                attempt += 1
                logger.warning(
                    f"Slug '{prepared.event.slug}' claimed concurrently, retrying",
                    extra={"slug": prepared.event.slug, "attempt": attempt},
                )

    async def create(self, data: dict) -> Event:
        """Validate raw fields and save them as a new event."""
        return await self.save(validate_event(data))

    async def update(self, current: Event, changes: dict) -> Event:
        """Apply raw field changes to a stored event, re-validating the merged record."""
        merged = current.model_dump(by_alias=True) | changes
        return await self.save(validate_event(merged), current=current)

    async def get_by_slug(self, slug: str | None) -> Event:
        """Fetch an event by slug, case- and whitespace-insensitively."""
        if not slug or not isinstance(slug, str):
            raise InputValidationError(
                "Slug parameter is required and must be a string", "slug",
            )
        normalized = slug.strip().lower()
        if not normalized:
            raise InputValidationError("Slug cannot be empty", "slug")

        event = await self.events.find_by_slug(normalized)
        if event is None:
            raise ResourceNotFoundError(
                "Event", normalized,
                message=f'Event with slug "{normalized}" not found',
                context=ErrorContext(slug=normalized),
            )
        return event
