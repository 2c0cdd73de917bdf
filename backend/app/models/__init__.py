"""Document Models — pydantic models for everything stored in MongoDB.

Invariants:
    - One model per collection; models carry validation, never IO
    - Mongo field names preserved via aliases (_id, eventId, createdAt, updatedAt)

Design Decisions:
    - One file per entity for locality
"""

from app.models.event import Event  # noqa: F401
from app.models.booking import Booking  # noqa: F401
