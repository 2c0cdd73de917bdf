"""Index Declarations — unique slug on events, eventId lookup on bookings.

Invariants:
    - events.slug is UNIQUE: the store-level backstop for the slug probe-then-write race
    - ensure_indexes is idempotent (create_index is a no-op for an identical index)
"""

from pymongo import ASCENDING
from pymongo.asynchronous.database import AsyncDatabase

from app.core.domain_types import Collection


async def ensure_indexes(db: AsyncDatabase) -> None:
    await db[Collection.EVENTS.value].create_index(
        [("slug", ASCENDING)], unique=True, name="slug_unique",
    )
    await db[Collection.BOOKINGS.value].create_index(
        [("eventId", ASCENDING)], name="event_id",
    )
