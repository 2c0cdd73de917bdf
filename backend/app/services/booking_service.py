"""Booking Service — referential check before every booking write.

Invariants:
    - A booking is written only if its event exists at prepare time
    - The check runs when the booking is new or its event_id changed; other edits skip it
    - A failed check rejects the write entirely (nothing partially applied)
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from app.core.errors import ErrorContext, ReferentialIntegrityError
from app.core.repository_protocols import BookingRepository, EventRepository
from app.models.booking import Booking

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedBooking:
    booking: Booking
    is_new: bool


class BookingService:
    """Booking persistence orchestration."""

    def __init__(self, bookings: BookingRepository, events: EventRepository):
        self.bookings = bookings
        self.events = events

    async def prepare(
        self, draft: Booking, current: Booking | None = None,
    ) -> PreparedBooking:
        is_new = current is None
        if is_new or draft.event_id != current.event_id:
            if not await self.events.exists(draft.event_id):
                logger.warning(
                    f"Booking rejected: event {draft.event_id} does not exist",
                    extra={"event_id": draft.event_id},
                )
                raise ReferentialIntegrityError(
                    "Event", draft.event_id,
                    context=ErrorContext(event_id=draft.event_id),
                )
        return PreparedBooking(booking=draft, is_new=is_new)

    async def commit(self, prepared: PreparedBooking) -> Booking:
        now = datetime.now(timezone.utc)
        if prepared.is_new:
            booking = prepared.booking.model_copy(
                update={"id": None, "created_at": now, "updated_at": now},
            )
            return await self.bookings.insert(booking)
        booking = prepared.booking.model_copy(update={"updated_at": now})
        return await self.bookings.replace(booking)

    async def save(self, draft: Booking, current: Booking | None = None) -> Booking:
        return await self.commit(await self.prepare(draft, current))

    async def list_for_event(self, event_id: str) -> list[Booking]:
        return await self.bookings.list_by_event(event_id)
