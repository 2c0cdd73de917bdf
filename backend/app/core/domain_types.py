"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EventId is a hex ObjectId string — converted to ObjectId only at the store
    - Slug is always the lowercased, trimmed form
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EventId = NewType("EventId", str)
Slug = NewType("Slug", str)


# ─── Enums ───────────────────────────────────────────────────────

class EventMode(str, Enum):
    """How attendees take part in an event."""
    ONLINE = "online"
    OFFLINE = "offline"
    HYBRID = "hybrid"


class Collection(str, Enum):
    """MongoDB collection names."""
    EVENTS = "events"
    BOOKINGS = "bookings"
