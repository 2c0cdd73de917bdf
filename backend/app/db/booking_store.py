"""Booking Store — MongoDB implementation of BookingRepository.

Invariants:
    - eventId stored as ObjectId (same type as events._id) so lookups use the index
    - Referential existence is NOT checked here — services/booking_service.py owns it
"""

from bson import ObjectId
from pymongo.asynchronous.database import AsyncDatabase

from app.core.domain_types import Collection
from app.core.errors import ResourceNotFoundError
from app.infrastructure.database import mongo_errors
from app.models.booking import Booking

_COLLECTION = Collection.BOOKINGS.value


def _to_document(booking: Booking) -> dict:
    doc = booking.to_document()
    doc["eventId"] = ObjectId(booking.event_id)
    return doc


class MongoBookingRepository:
    """Bookings collection access."""

    def __init__(self, db: AsyncDatabase):
        self.collection = db[_COLLECTION]

    async def insert(self, booking: Booking) -> Booking:
        async with mongo_errors("insert", _COLLECTION):
            result = await self.collection.insert_one(_to_document(booking))
        return booking.model_copy(update={"id": str(result.inserted_id)})

    async def replace(self, booking: Booking) -> Booking:
        async with mongo_errors("replace", _COLLECTION):
            result = await self.collection.replace_one(
                {"_id": ObjectId(booking.id)}, _to_document(booking),
            )
        if result.matched_count == 0:
            raise ResourceNotFoundError("Booking", str(booking.id))
        return booking

    async def list_by_event(self, event_id: str) -> list[Booking]:
        async with mongo_errors("find", _COLLECTION):
            cursor = self.collection.find({"eventId": ObjectId(event_id)})
            docs = await cursor.to_list(length=None)
        return [Booking.model_validate(doc) for doc in docs]
