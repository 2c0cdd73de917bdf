"""Boundary Protocols — contracts between core/services and the document store.

Invariants:
    - Services NEVER import the Mongo repositories — they depend on these Protocols
    - Ids cross the boundary as strings; ObjectId conversion is the store's job
    - Implementations provided by the API layer via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, in-memory fakes need no inheritance
    - find_id_by_slug is the uniqueness oracle: returns the owner id so the resolver
      can tell "taken by me" from "taken by someone else"
"""

from typing import Protocol

from app.core.domain_types import EventId
from app.models.booking import Booking
from app.models.event import Event


class EventRepository(Protocol):
    """Contract for event persistence."""
    async def find_by_slug(self, slug: str) -> Event | None: ...
    async def find_id_by_slug(self, slug: str) -> EventId | None: ...
    async def get_by_id(self, event_id: str) -> Event | None: ...
    async def exists(self, event_id: str) -> bool: ...
    async def insert(self, event: Event) -> Event: ...
    async def replace(self, event: Event) -> Event: ...


class BookingRepository(Protocol):
    """Contract for booking persistence."""
    async def insert(self, booking: Booking) -> Booking: ...
    async def replace(self, booking: Booking) -> Booking: ...
    async def list_by_event(self, event_id: str) -> list[Booking]: ...
