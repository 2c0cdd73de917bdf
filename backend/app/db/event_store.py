"""Event Store — MongoDB implementation of EventRepository.

Invariants:
    - Ids are hex strings outside this module, ObjectId inside
    - Every driver call runs inside mongo_errors() — no PyMongo exception escapes
    - A duplicate slug on insert/replace surfaces as DuplicateKeyConflictError

Design Decisions:
    - find_id_by_slug projects only _id: the slug probe runs once per candidate
"""

import logging

from bson import ObjectId
from pymongo.asynchronous.database import AsyncDatabase

from app.core.domain_types import Collection, EventId
from app.core.errors import ResourceNotFoundError
from app.infrastructure.database import mongo_errors
from app.models.event import Event

logger = logging.getLogger(__name__)

_COLLECTION = Collection.EVENTS.value


class MongoEventRepository:
    """Events collection access."""

    def __init__(self, db: AsyncDatabase):
        self.collection = db[_COLLECTION]

    async def find_by_slug(self, slug: str) -> Event | None:
        async with mongo_errors("find", _COLLECTION):
            doc = await self.collection.find_one({"slug": slug})
        return Event.model_validate(doc) if doc else None

    async def find_id_by_slug(self, slug: str) -> EventId | None:
        async with mongo_errors("find", _COLLECTION):
            doc = await self.collection.find_one({"slug": slug}, {"_id": 1})
        return EventId(str(doc["_id"])) if doc else None

    async def get_by_id(self, event_id: str) -> Event | None:
        async with mongo_errors("find", _COLLECTION):
            doc = await self.collection.find_one({"_id": ObjectId(event_id)})
        return Event.model_validate(doc) if doc else None

    async def exists(self, event_id: str) -> bool:
        async with mongo_errors("count", _COLLECTION):
            count = await self.collection.count_documents(
                {"_id": ObjectId(event_id)}, limit=1,
            )
        return count > 0

    async def insert(self, event: Event) -> Event:
        async with mongo_errors("insert", _COLLECTION):
            result = await self.collection.insert_one(event.to_document())
        logger.info(
            f"Event '{event.slug}' inserted",
            extra={"slug": event.slug, "event_id": str(result.inserted_id)},
        )
        return event.model_copy(update={"id": str(result.inserted_id)})

    async def replace(self, event: Event) -> Event:
        async with mongo_errors("replace", _COLLECTION):
            result = await self.collection.replace_one(
                {"_id": ObjectId(event.id)}, event.to_document(),
            )
        if result.matched_count == 0:
            raise ResourceNotFoundError("Event", str(event.id))
        return event
